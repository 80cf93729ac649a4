"""Slug generation for question titles."""

import re
import unicodedata
from typing import Callable

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Lowercase ASCII words of `title` joined by hyphens."""
    normalized = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("-", normalized.lower()).strip("-")
    return slug or "question"


def generate_unique_slug(title: str, exists: Callable[[str], bool]) -> str:
    """Slug for `title` that `exists` reports as unused.

    Collisions get a numeric suffix: `my-title`, `my-title-2`, `my-title-3`, ...
    """
    base = slugify(title)
    slug = base
    suffix = 2
    while exists(slug):
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug

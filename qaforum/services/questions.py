"""Question use cases."""

import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from qaforum.auth.ownership import ensure_owner
from qaforum.database.answer_repository import AnswerRepository
from qaforum.database.question_repository import QuestionRepository
from qaforum.errors import NotFoundError, ValidationError
from qaforum.models.identity import AuthenticatedUser
from qaforum.models.question import CONTENT_MIN_LENGTH, TITLE_MIN_LENGTH, Question
from qaforum.services.slugs import generate_unique_slug
from qaforum.services.validation import require_min_length, require_object_id, require_value

logger = logging.getLogger(__name__)

SLUG_ATTEMPTS = 3


def _validate_title_and_content(title: str, content: str) -> None:
    require_min_length(title, TITLE_MIN_LENGTH, "Please provide a title that is at least 10 characters long.")
    require_min_length(content, CONTENT_MIN_LENGTH, "Please provide a content that is at least 20 characters long.")


class QuestionService:
    """Ask, read, edit and delete questions."""

    def __init__(self, questions: QuestionRepository, answers: AnswerRepository):
        self.questions = questions
        self.answers = answers

    def ask(self, identity: AuthenticatedUser, title: Optional[str], content: Optional[str]) -> Question:
        if not title or not content:
            raise ValidationError("Please provide a title and content")
        _validate_title_and_content(title, content)

        question = self._create_with_unique_slug(identity, title, content)
        logger.info(f"User {identity.id} asked question {question.id}")
        return question

    def _create_with_unique_slug(self, identity: AuthenticatedUser, title: str, content: str) -> Question:
        # A concurrent insert can take the slug between the check and the insert.
        for attempt in range(1, SLUG_ATTEMPTS + 1):
            slug = generate_unique_slug(title, self.questions.slug_exists)
            try:
                return self.questions.create(title=title, content=content, slug=slug, user_id=identity.id)
            except DuplicateKeyError:
                logger.warning(f"Slug {slug} taken concurrently (attempt {attempt}/{SLUG_ATTEMPTS})")
        raise ValidationError("A question with this title is being created. Please try again.")

    def get(self, question_id: str) -> Question:
        require_object_id(question_id, "question")
        question = self.questions.get(question_id)
        if question is None:
            raise NotFoundError("There is no question with that id")
        return question

    def edit(
        self,
        identity: AuthenticatedUser,
        question_id: str,
        title: Optional[str],
        content: Optional[str],
    ) -> Question:
        """Replace title and content of a question owned by `identity`."""
        require_object_id(question_id, "question")
        require_value(content, "Please provide content to edit the question.")
        require_value(title, "Please provide a title to edit the question.")
        _validate_title_and_content(title, content)

        question = self.get(question_id)
        ensure_owner(question, identity, "You cannot edit this question.")

        updated = self.questions.update(question_id, title=title, content=content)
        if updated is None:
            raise NotFoundError("There is no question with that id")
        return updated

    def delete(self, identity: AuthenticatedUser, question_id: str) -> None:
        """Delete a question owned by `identity` together with its answers."""
        question = self.get(question_id)
        ensure_owner(question, identity, "You cannot delete this question.")

        removed_answers = self.answers.delete_for_question(question_id)
        if not self.questions.delete(question_id):
            raise NotFoundError("There is no question with that id")
        logger.info(f"User {identity.id} deleted question {question_id} ({removed_answers} answers)")

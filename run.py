#!/usr/bin/env python3
"""Run script for qaForum."""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "qaforum.api.app:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "False").lower() == "true",
    )

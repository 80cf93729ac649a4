"""Answer use cases."""

import logging
from typing import List, Optional

from qaforum.auth.ownership import ensure_owner
from qaforum.database.answer_repository import AnswerRepository
from qaforum.database.question_repository import QuestionRepository
from qaforum.errors import NotFoundError, ValidationError
from qaforum.models.answer import CONTENT_MIN_LENGTH, Answer
from qaforum.models.identity import AuthenticatedUser
from qaforum.services.validation import require_min_length, require_object_id, require_value

logger = logging.getLogger(__name__)


class AnswerService:
    """Answer, read, edit, delete and like answers of a question."""

    def __init__(self, questions: QuestionRepository, answers: AnswerRepository):
        self.questions = questions
        self.answers = answers

    def _require_question(self, question_id: str) -> None:
        require_object_id(question_id, "question")
        if self.questions.get(question_id) is None:
            raise NotFoundError("There is no question with that id")

    def _validate_content(self, content: Optional[str], missing_message: str) -> str:
        require_value(content, missing_message)
        return require_min_length(content, CONTENT_MIN_LENGTH, "Please provide minimum 10 characters.")

    def add(self, identity: AuthenticatedUser, question_id: str, content: Optional[str]) -> Answer:
        require_object_id(question_id, "question")
        self._validate_content(content, "Please provide a content for the answer.")
        self._require_question(question_id)

        answer = self.answers.create(content=content, user_id=identity.id, question_id=question_id)
        logger.info(f"User {identity.id} answered question {question_id} ({answer.id})")
        return answer

    def list_for_question(self, question_id: str) -> List[Answer]:
        self._require_question(question_id)
        return self.answers.find_by_question(question_id)

    def get(self, question_id: str, answer_id: str) -> Answer:
        require_object_id(question_id, "question")
        require_object_id(answer_id, "answer")
        answer = self.answers.get(question_id, answer_id)
        if answer is None:
            raise NotFoundError("There is no answer with that id.")
        return answer

    def edit(
        self,
        identity: AuthenticatedUser,
        question_id: str,
        answer_id: str,
        content: Optional[str],
    ) -> Answer:
        require_object_id(question_id, "question")
        require_object_id(answer_id, "answer")
        self._validate_content(content, "Please provide a content to edit the answer.")

        answer = self.get(question_id, answer_id)
        ensure_owner(answer, identity, "You cannot edit this answer.")

        updated = self.answers.update_content(answer_id, content)
        if updated is None:
            raise NotFoundError("Answer could not be found.")
        return updated

    def delete(self, identity: AuthenticatedUser, question_id: str, answer_id: str) -> None:
        answer = self.get(question_id, answer_id)
        ensure_owner(answer, identity, "You cannot delete this answer.")

        if not self.answers.delete(answer_id):
            raise NotFoundError("Answer could not be found.")
        logger.info(f"User {identity.id} deleted answer {answer_id}")

    def like(self, identity: AuthenticatedUser, question_id: str, answer_id: str) -> None:
        """Record a like from `identity`; each user may like an answer once.

        Raises:
            ValidationError: If `identity` already liked the answer
        """
        answer = self.get(question_id, answer_id)
        if identity.id in answer.likes:
            raise ValidationError("You already liked this answer")

        if not self.answers.add_like(answer_id, identity.id):
            # Lost a race with a concurrent like from the same user, or the
            # answer was deleted in between.
            if self.answers.get(question_id, answer_id) is None:
                raise NotFoundError("Answer could not be found")
            raise ValidationError("You already liked this answer")

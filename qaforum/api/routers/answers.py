"""Answer endpoints, nested under a question."""

from fastapi import APIRouter, Depends

from qaforum.api.dependencies import get_answer_service
from qaforum.api.models import AnswerRequest
from qaforum.auth.dependencies import get_current_user
from qaforum.models.identity import AuthenticatedUser
from qaforum.services.answers import AnswerService

router = APIRouter(prefix="/question/{question_id}/answers", tags=["answer"])


@router.post("/")
def add_answer(
    question_id: str,
    payload: AnswerRequest,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: AnswerService = Depends(get_answer_service),
):
    answer = service.add(identity, question_id, payload.content)
    return {"success": True, "message": "Your answer has been generated", "answer": answer}


@router.get("/")
def list_answers(question_id: str, service: AnswerService = Depends(get_answer_service)):
    answers = service.list_for_question(question_id)
    return {"success": True, "answers_count": len(answers), "answers": answers}


@router.get("/{answer_id}")
def get_answer(question_id: str, answer_id: str, service: AnswerService = Depends(get_answer_service)):
    return {"success": True, "answer": service.get(question_id, answer_id)}


@router.put("/{answer_id}")
def edit_answer(
    question_id: str,
    answer_id: str,
    payload: AnswerRequest,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: AnswerService = Depends(get_answer_service),
):
    """Replace the content of an answer (author only)."""
    answer = service.edit(identity, question_id, answer_id, payload.content)
    return {"success": True, "answer": answer}


@router.delete("/{answer_id}")
def delete_answer(
    question_id: str,
    answer_id: str,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: AnswerService = Depends(get_answer_service),
):
    service.delete(identity, question_id, answer_id)
    return {"success": True, "message": "Your answer has been deleted."}


@router.put("/{answer_id}/like")
def like_answer(
    question_id: str,
    answer_id: str,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: AnswerService = Depends(get_answer_service),
):
    service.like(identity, question_id, answer_id)
    return {"success": True, "message": "You liked this answer"}

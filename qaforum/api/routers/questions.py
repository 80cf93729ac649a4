"""Question endpoints."""

from fastapi import APIRouter, Depends

from qaforum.api.dependencies import get_question_service
from qaforum.api.models import QuestionRequest
from qaforum.api.routers.account import UNDER_DEVELOPMENT
from qaforum.auth.dependencies import get_current_user
from qaforum.errors import NotImplementedFeatureError
from qaforum.models.identity import AuthenticatedUser
from qaforum.services.questions import QuestionService

router = APIRouter(prefix="/question", tags=["question"])


@router.post("/")
def ask_question(
    payload: QuestionRequest,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: QuestionService = Depends(get_question_service),
):
    question = service.ask(identity, payload.title, payload.content)
    return {"success": True, "data": question}


@router.get("/{question_id}")
def get_question(question_id: str, service: QuestionService = Depends(get_question_service)):
    return {"success": True, "data": service.get(question_id)}


@router.put("/edit/{question_id}")
def edit_question(
    question_id: str,
    payload: QuestionRequest,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: QuestionService = Depends(get_question_service),
):
    """Edit title and content (author only)."""
    question = service.edit(identity, question_id, payload.title, payload.content)
    return {"success": True, "message": "Your question has been updated.", "question": question}


@router.delete("/delete/{question_id}")
def delete_question(
    question_id: str,
    identity: AuthenticatedUser = Depends(get_current_user),
    service: QuestionService = Depends(get_question_service),
):
    """Delete a question and its answers (author only)."""
    service.delete(identity, question_id)
    return {"success": True, "message": "Your question has been deleted."}


@router.put("/like/{question_id}", dependencies=[Depends(get_current_user)])
def like_question(question_id: str):
    raise NotImplementedFeatureError(UNDER_DEVELOPMENT)


@router.put("/undolike/{question_id}", dependencies=[Depends(get_current_user)])
def undo_like_question(question_id: str):
    raise NotImplementedFeatureError(UNDER_DEVELOPMENT)

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..dependencies import get_chat_service
from ..logger import get_logger
from ..schemas import (
    CreateSessionRequest,
    CreateSessionResponse,
    ErrorResponse,
    MessageResponse,
    SendMessageRequest,
)
from ..services.chat_service import ChatService


logger = get_logger(__name__)

router = APIRouter(
    prefix="/chat",
    tags=["chat"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)


@router.post("/session", response_model=CreateSessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: Optional[CreateSessionRequest] = None,
    service: ChatService = Depends(get_chat_service),
):
    logger.info("Received request to create new chat session")
    session = service.create_session(payload.initial_message if payload else None)
    logger.info("Successfully created session with ID: %s", session.session_id)
    return CreateSessionResponse(session_id=session.session_id, created_at=session.created_at)


@router.post("/message", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(payload: SendMessageRequest, service: ChatService = Depends(get_chat_service)):
    logger.info("Received request to send message to session: %s", payload.session_id)
    message = service.send_message(payload.session_id, payload.content, payload.sender)
    logger.info("Successfully sent message with ID: %s", message.message_id)
    return MessageResponse.model_validate(message)


@router.get("/history/{session_id}", response_model=List[MessageResponse])
def get_chat_history(session_id: str, service: ChatService = Depends(get_chat_service)):
    logger.info("Received request to get chat history for session: %s", session_id)
    messages = service.get_chat_history(session_id)
    logger.info("Successfully retrieved %d messages for session: %s", len(messages), session_id)
    return [MessageResponse.model_validate(m) for m in messages]

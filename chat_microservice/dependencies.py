from fastapi import Depends
from sqlalchemy.orm import Session as OrmSession

from .database import get_db
from .services.chat_service import ChatService


def get_chat_service(db: OrmSession = Depends(get_db)) -> ChatService:
    """
    Build the ChatService for one request on its database session.
    Overridden in tests.
    """
    return ChatService(db)

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, String
from ..database import Base


def utcnow() -> datetime:
    # Naive UTC, SQLite does not keep tzinfo
    return datetime.now(timezone.utc).replace(tzinfo=None)


def guid_column(primary_key: bool = False):
    # Use String for compatibility across SQLite/Postgres
    return Column(String(36), primary_key=primary_key, default=lambda: str(uuid.uuid4()))


class ChatSession(Base):
    __tablename__ = "chat_sessions"

    session_id = guid_column(primary_key=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

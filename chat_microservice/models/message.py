from sqlalchemy import Column, DateTime, ForeignKey, Index, String
from ..database import Base
from .session import guid_column, utcnow


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    message_id = guid_column(primary_key=True)
    session_id = Column(String(36), ForeignKey("chat_sessions.session_id"), nullable=False)
    content = Column(String(1000), nullable=False)
    sender = Column(String(50), nullable=False)  # "system" for seeded messages
    timestamp = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (Index("ix_chat_messages_session_id_timestamp", "session_id", "timestamp"),)

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session as OrmSession

from ..models.message import ChatMessage
from ..schemas import MessageRecord


class MessageRepository:
    def __init__(self, db: OrmSession):
        self.db = db

    def save(self, message: MessageRecord) -> MessageRecord:
        """Persist a message, assigning its id and timestamp when absent."""
        row = ChatMessage(**message.model_dump(exclude_none=True))
        self.db.add(row)
        self.db.flush()
        return MessageRecord.model_validate(row)

    def find_by_session_id_ordered_by_timestamp(self, session_id: str) -> List[MessageRecord]:
        stmt = (
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.timestamp.asc())
        )
        return [MessageRecord.model_validate(row) for row in self.db.scalars(stmt).all()]

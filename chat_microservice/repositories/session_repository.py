from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session as OrmSession

from ..models.session import ChatSession
from ..schemas import SessionRecord


class SessionRepository:
    def __init__(self, db: OrmSession):
        self.db = db

    def save(self, session: Optional[SessionRecord] = None) -> SessionRecord:
        """Persist a session, assigning its id and creation time when absent."""
        row = ChatSession(**(session or SessionRecord()).model_dump(exclude_none=True))
        self.db.add(row)
        self.db.flush()
        return SessionRecord.model_validate(row)

    def find_by_id(self, session_id: str) -> Optional[SessionRecord]:
        row = self.db.get(ChatSession, session_id)
        return SessionRecord.model_validate(row) if row is not None else None

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(ChatSession)) or 0

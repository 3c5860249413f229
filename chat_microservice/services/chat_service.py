from typing import List, Optional

from sqlalchemy.orm import Session as OrmSession

from ..database import transaction
from ..errors import SessionNotFoundError
from ..logger import get_logger
from ..repositories.message_repository import MessageRepository
from ..repositories.session_repository import SessionRepository
from ..schemas import MessageRecord, SessionRecord


logger = get_logger(__name__)

SYSTEM_SENDER = "system"


class ChatService:
    """Session and message bookkeeping on top of the two stores.

    Each public call runs in its own transaction on ``db``; lookups run
    read-only.
    """

    def __init__(
        self,
        db: OrmSession,
        sessions: Optional[SessionRepository] = None,
        messages: Optional[MessageRepository] = None,
    ):
        self.db = db
        self.sessions = sessions if sessions is not None else SessionRepository(db)
        self.messages = messages if messages is not None else MessageRepository(db)

    def create_session(self, initial_message: Optional[str] = None) -> SessionRecord:
        """Create a session, seeding it with a system message when one is given."""
        logger.info(
            "Creating new chat session with initial message: %s",
            "provided" if initial_message else "none",
        )
        with transaction(self.db):
            session = self.sessions.save(SessionRecord())
            if initial_message is not None and initial_message.strip():
                self.messages.save(
                    MessageRecord(
                        session_id=session.session_id,
                        content=initial_message,
                        sender=SYSTEM_SENDER,
                    )
                )
        logger.info("Created chat session with ID: %s", session.session_id)
        return session

    def send_message(self, session_id: str, content: str, sender: str) -> MessageRecord:
        logger.info("Sending message to session: %s from sender: %s", session_id, sender)
        with transaction(self.db):
            self._require_session(session_id)
            message = self.messages.save(
                MessageRecord(session_id=session_id, content=content, sender=sender)
            )
        logger.info("Message sent successfully with ID: %s", message.message_id)
        return message

    def get_chat_history(self, session_id: str) -> List[MessageRecord]:
        """Messages of ``session_id``, oldest first."""
        logger.info("Retrieving chat history for session: %s", session_id)
        with transaction(self.db, read_only=True):
            self._require_session(session_id)
            history = self.messages.find_by_session_id_ordered_by_timestamp(session_id)
        logger.info("Retrieved %d messages for session: %s", len(history), session_id)
        return history

    def get_session(self, session_id: str) -> Optional[SessionRecord]:
        with transaction(self.db, read_only=True):
            return self.sessions.find_by_id(session_id)

    def get_session_count(self) -> int:
        with transaction(self.db, read_only=True):
            return self.sessions.count()

    def _require_session(self, session_id: str) -> SessionRecord:
        session = self.sessions.find_by_id(session_id)
        if session is None:
            logger.warning("Session not found: %s", session_id)
            raise SessionNotFoundError(session_id)
        return session

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


INITIAL_MESSAGE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 500
SENDER_MAX_LENGTH = 50


# Records handed out by the stores


class SessionRecord(BaseModel):
    session_id: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class MessageRecord(BaseModel):
    message_id: Optional[str] = None
    session_id: str
    content: str
    sender: str
    timestamp: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


# Request bodies


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("not_blank", message)
    return value


def _limit_length(value: Optional[str], limit: int, message: str) -> Optional[str]:
    if value is not None and len(value) > limit:
        raise PydanticCustomError("too_long", message)
    return value


class CreateSessionRequest(BaseModel):
    initial_message: Optional[str] = None

    @field_validator("initial_message")
    @classmethod
    def _initial_message_length(cls, value: Optional[str]) -> Optional[str]:
        return _limit_length(
            value,
            INITIAL_MESSAGE_MAX_LENGTH,
            f"Initial message cannot exceed {INITIAL_MESSAGE_MAX_LENGTH} characters",
        )


class SendMessageRequest(BaseModel):
    # Optional at the type level so a missing field reports the same message as a blank one
    session_id: Optional[str] = Field(default=None, validate_default=True)
    content: Optional[str] = Field(default=None, validate_default=True)
    sender: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("session_id")
    @classmethod
    def _session_id_present(cls, value: Optional[str]) -> str:
        return _require_text(value, "Session ID is required")

    @field_validator("content")
    @classmethod
    def _content_valid(cls, value: Optional[str]) -> str:
        value = _require_text(value, "Message content is required")
        return _limit_length(
            value,
            CONTENT_MAX_LENGTH,
            f"Message content cannot exceed {CONTENT_MAX_LENGTH} characters",
        )

    @field_validator("sender")
    @classmethod
    def _sender_valid(cls, value: Optional[str]) -> str:
        value = _require_text(value, "Sender is required")
        return _limit_length(
            value,
            SENDER_MAX_LENGTH,
            f"Sender name cannot exceed {SENDER_MAX_LENGTH} characters",
        )


# Responses


class CreateSessionResponse(BaseModel):
    session_id: str
    created_at: datetime


class MessageResponse(BaseModel):
    message_id: str
    session_id: str
    content: str
    sender: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    status: int
    message: str
    timestamp: datetime
    validation_errors: Optional[Dict[str, str]] = None


class HealthMetrics(BaseModel):
    active_sessions: int


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    service: str
    version: str
    metrics: HealthMetrics

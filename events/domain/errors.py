"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_ALREADY_EXISTS = "EVENT_ALREADY_EXISTS"
    PARTICIPANT_ALREADY_REGISTERED = "PARTICIPANT_ALREADY_REGISTERED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class EventAlreadyExistsError(DomainError):
    """Raised when an event is already scheduled at the same place and time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_EXISTS,
            message="An event already exists at this location and date",
        )


class ParticipantAlreadyRegisteredError(DomainError):
    """Raised when a user is already among an event's participants."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.PARTICIPANT_ALREADY_REGISTERED,
            message="User is already participating in this event",
        )
        self.user_id = user_id

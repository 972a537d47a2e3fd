"""Domain error codes for the invites module."""

from enum import Enum

from core.errors import (
    ConflictError,
    ExpiredError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)


class ErrorCode(Enum):
    """Domain error codes."""

    INVITE_CODE_NOT_FOUND = "INVITE_CODE_NOT_FOUND"
    INVITE_CODE_EXPIRED = "INVITE_CODE_EXPIRED"
    INVITE_CODE_ALREADY_USED = "INVITE_CODE_ALREADY_USED"
    INVITE_CODE_REVOKED = "INVITE_CODE_REVOKED"
    INVITE_CODE_NOT_PENDING = "INVITE_CODE_NOT_PENDING"
    INVALID_INVITE_CODE_ID = "INVALID_INVITE_CODE_ID"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_ROLE = "INVALID_ROLE"
    EVENT_REQUIRED = "EVENT_REQUIRED"
    ROLE_NOT_EVENT_SCOPED = "ROLE_NOT_EVENT_SCOPED"
    INVALID_EXPIRATION = "INVALID_EXPIRATION"
    REASON_REQUIRED = "REASON_REQUIRED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NOT_ALLOWED = "NOT_ALLOWED"
    CODE_GENERATION_FAILED = "CODE_GENERATION_FAILED"


class InviteCodeNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVITE_CODE_NOT_FOUND, message="Invite code not found")


class InviteCodeExpiredError(ExpiredError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVITE_CODE_EXPIRED, message="Invite code has expired")


class InviteCodeAlreadyUsedError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVITE_CODE_ALREADY_USED,
            message="Invite code has already been used",
        )


class InviteCodeRevokedError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVITE_CODE_REVOKED, message="Invite code has been revoked"
        )


class InviteCodeNotPendingError(ConflictError):
    """Raised when revoking a code that already reached a terminal state."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVITE_CODE_NOT_PENDING,
            message="Only pending invite codes can be revoked",
        )


class InvalidInviteCodeIdError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INVITE_CODE_ID, message="Invalid invite code ID format"
        )


class InvalidRoleError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ROLE, message="Role cannot be granted by invite")


class EventRequiredError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_REQUIRED, message="An event is required for staff invites"
        )


class RoleNotEventScopedError(ValidationFailedError):
    """Raised when a platform-wide role is tied to an event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ROLE_NOT_EVENT_SCOPED,
            message="Only staff invites can be scoped to an event",
        )


class InvalidExpirationError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EXPIRATION, message="Expiration hours must be positive"
        )


class RevocationReasonRequiredError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REASON_REQUIRED, message="A reason is required to revoke a code"
        )


class InviteEventNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")


class InviteNotAllowedError(UnauthorizedError):
    """Raised when the caller may not issue or revoke the code."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_ALLOWED, message="You are not allowed to manage this invite code"
        )


class CodeGenerationError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CODE_GENERATION_FAILED,
            message="Could not generate a unique invite code",
        )


class InvalidEventIdError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_EVENT_ID, message="Invalid event ID format")

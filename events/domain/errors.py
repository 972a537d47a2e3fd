"""Domain error codes for the events module."""

from enum import Enum

from core.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    DISCOUNT_NOT_FOUND = "DISCOUNT_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    NOT_EVENT_ORGANIZER = "NOT_EVENT_ORGANIZER"
    ACTIVE_DISCOUNT_EXISTS = "ACTIVE_DISCOUNT_EXISTS"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_PERCENTAGE = "INVALID_PERCENTAGE"
    INVALID_DISCOUNT_VALUE = "INVALID_DISCOUNT_VALUE"
    INVALID_PRICE = "INVALID_PRICE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    EVENT_NOT_ON_SALE = "EVENT_NOT_ON_SALE"
    TICKETS_SOLD_OUT = "TICKETS_SOLD_OUT"


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")


class TicketTypeNotFoundError(NotFoundError):
    """Raised when a ticket type is missing or belongs to another event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Ticket type not found",
        )


class DiscountNotFoundError(NotFoundError):
    """Raised when a discount is missing or belongs to another ticket type."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.DISCOUNT_NOT_FOUND, message="Discount not found")


class InvalidIdError(ValidationFailedError):
    """Raised when a path identifier is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid ID format")


class NotEventOrganizerError(UnauthorizedError):
    """Raised when the caller does not organize the owning event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_ORGANIZER,
            message="Only the event organizer can perform this operation",
        )


class ActiveDiscountExistsError(ConflictError):
    """Raised when a second discount would become active for a ticket type."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACTIVE_DISCOUNT_EXISTS,
            message=(
                "An active discount already exists for this ticket type. "
                "Deactivate it before activating another."
            ),
        )


class InvalidDateRangeError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Valid to date must be after valid from date",
        )


class InvalidPercentageError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PERCENTAGE,
            message="Percentage discount must be greater than 0 and at most 100",
        )


class InvalidDiscountValueError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DISCOUNT_VALUE,
            message="Fixed amount discount must be positive",
        )


class InvalidPriceError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_PRICE, message="Base price must be positive")


class InvalidQuantityError(ValidationFailedError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_QUANTITY, message="Quantity must be positive")


class EventNotOnSaleError(ConflictError):
    """Raised when the event is unpublished or outside its sales window."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_ON_SALE,
            message="Tickets are not available for purchase for this event",
        )


class TicketsSoldOutError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKETS_SOLD_OUT,
            message="Not enough tickets left for this ticket type",
        )

from typing import Any, Sequence


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message}


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class StorageFailureError(CustomBaseError):
    """Opaque persistence failure; the whole submission was rolled back and is safe to retry."""

    def __init__(self, message: str = 'Storage failure, please retry') -> None:
        super().__init__(message, 503)


# ========== Seat selection / booking validation ==========


class EmptySelectionError(DomainError):
    def __init__(self, message: str = 'No seats selected') -> None:
        super().__init__(message)


class DuplicateSeatError(DomainError):
    def __init__(self, seats: Sequence[str]) -> None:
        self.seats = list(seats)
        super().__init__(f'Seats selected more than once: {", ".join(self.seats)}')

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'seats': self.seats}


class InvalidSeatError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class TicketCountMismatchError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class TicketCountExceededError(DomainError):
    def __init__(self, ticket_count: int) -> None:
        self.ticket_count = ticket_count
        super().__init__(f'Cannot select more seats than tickets: you have {ticket_count} tickets')


class SeatUnavailableError(ConflictError):
    def __init__(self, seat: str) -> None:
        self.seat = seat
        super().__init__(f'Seat {seat} is already taken')

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'seats': [self.seat]}


class SeatConflictError(ConflictError):
    def __init__(self, seats: Sequence[str]) -> None:
        self.seats = list(seats)
        super().__init__(f'Seats no longer available: {", ".join(self.seats)}')

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'seats': self.seats}


class InvalidTransitionError(ConflictError):
    def __init__(self, from_status: str, to_status: str) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f'Cannot change booking status from {from_status} to {to_status}')

    def to_content(self) -> dict[str, Any]:
        return {
            'detail': self.message,
            'from_status': self.from_status,
            'to_status': self.to_status,
        }

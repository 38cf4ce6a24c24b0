# common/exceptions.py
import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Базовое исключение доменных операций (залы, брони, пользователи)."""

    kind = "error"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- not_found ---


class NotFound(BookingError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


# --- validation ---


class ValidationFailed(BookingError):
    kind = "validation"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidDate(ValidationFailed):
    default_message = "Event date must be in the future"


# --- conflict ---


class Conflict(BookingError):
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class HallUnavailable(Conflict):
    default_message = "Hall is not available on the requested date"


class HallAlreadyBooked(Conflict):
    default_message = "Hall is already booked for this date"


class HallHasApprovedBookings(Conflict):
    default_message = "Cannot deactivate a hall with approved bookings"


# --- forbidden ---


class Forbidden(BookingError):
    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You can only cancel your own bookings"


# --- state_error ---


class StateError(BookingError):
    kind = "state_error"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Operation is not allowed in the current state"


class HallInactive(StateError):
    default_message = "Marriage hall is not active"


class AlreadyCancelled(StateError):
    default_message = "Booking is already cancelled"


class TooLateToCancel(StateError):
    default_message = "Bookings can only be cancelled at least 24 hours before the event date"


class AlreadyDeactivated(StateError):
    default_message = "Marriage hall is already deactivated"


# HTTP-статус -> kind для исключений самого DRF (404, 400 ...)
KIND_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: "validation",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_409_CONFLICT: "conflict",
}


def custom_exception_handler(exc, context):
    if isinstance(exc, BookingError):
        return Response(
            {"detail": exc.message, "kind": exc.kind},
            status=exc.status_code,
        )

    response = exception_handler(exc, context)

    if response is None and isinstance(exc, IntegrityError):
        logger.warning("Integrity error surfaced to the client: %s", exc)
        return Response(
            {"detail": "Request conflicts with existing data", "kind": "conflict"},
            status=status.HTTP_409_CONFLICT,
        )

    if response is None:
        return response

    kind = KIND_BY_STATUS.get(response.status_code)
    if isinstance(exc, ValidationError):
        response.data = {
            "detail": "Invalid input",
            "kind": "validation",
            "errors": response.data,
        }
    elif kind and isinstance(response.data, dict):
        response.data["kind"] = kind

    return response

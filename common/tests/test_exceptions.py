from unittest import mock

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import NotFound as DRFNotFound

from common.exceptions import HallAlreadyBooked, custom_exception_handler


def test_integrity_error_hides_database_text():
    exc = IntegrityError("UNIQUE constraint failed: booking_booking.hall_id, booking_booking.event_date")

    with mock.patch("common.exceptions.logger") as logger:
        response = custom_exception_handler(exc, {})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.data == {"detail": "Request conflicts with existing data", "kind": "conflict"}
    # подробности остаются только в логе
    logger.warning.assert_called_once_with("Integrity error surfaced to the client: %s", exc)


def test_domain_error_is_rendered_with_kind():
    response = custom_exception_handler(HallAlreadyBooked(), {})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.data == {"detail": "Hall is already booked for this date", "kind": "conflict"}


def test_drf_error_gets_kind():
    response = custom_exception_handler(DRFNotFound(), {})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["kind"] == "not_found"


def test_unknown_error_is_left_to_django():
    assert custom_exception_handler(RuntimeError("boom"), {}) is None

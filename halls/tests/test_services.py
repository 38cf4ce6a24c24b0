from decimal import Decimal
from unittest import mock

import pytest

from common.exceptions import AlreadyDeactivated, HallHasApprovedBookings, NotFound
from common.testing import make_booking, make_hall
from booking.models import Booking
from booking.services import update_booking_status
from halls.models import Hall
from halls.services import HallPatch, UNSET, deactivate_hall, update_hall


@pytest.mark.django_db
def test_deactivate_hall_without_bookings():
    hall = make_hall()

    result = deactivate_hall(hall.pk)

    assert result["success"] is True
    hall.refresh_from_db()
    assert hall.is_active is False


@pytest.mark.django_db
@pytest.mark.parametrize(
    "status",
    [Booking.Status.PENDING, Booking.Status.REJECTED, Booking.Status.CANCELLED],
)
def test_deactivate_hall_ignores_non_approved_bookings(status):
    hall = make_hall()
    booking = make_booking(hall=hall, status=status)

    deactivate_hall(hall.pk)

    hall.refresh_from_db()
    assert hall.is_active is False
    # история броней остаётся
    assert Booking.objects.filter(pk=booking.pk, hall=hall).exists()


@pytest.mark.django_db
def test_deactivate_hall_with_approved_booking_fails():
    hall = make_hall()
    make_booking(hall=hall, status=Booking.Status.APPROVED)

    with pytest.raises(HallHasApprovedBookings) as exc_info:
        deactivate_hall(hall.pk)

    assert exc_info.value.kind == "conflict"
    hall.refresh_from_db()
    assert hall.is_active is True


@pytest.mark.django_db
def test_deactivate_hall_twice_reports_already_deactivated():
    hall = make_hall()
    deactivate_hall(hall.pk)

    with pytest.raises(AlreadyDeactivated) as exc_info:
        deactivate_hall(hall.pk)

    assert exc_info.value.kind == "state_error"
    assert Hall.objects.filter(pk=hall.pk).exists()


@pytest.mark.django_db
def test_deactivate_unknown_hall():
    with pytest.raises(NotFound):
        deactivate_hall(999999)


@pytest.mark.django_db
def test_update_hall_applies_only_present_fields():
    hall = make_hall(name="Royal Palace", capacity=300, images=["https://img.example.com/1.jpg"])

    updated = update_hall(hall.pk, HallPatch(capacity=450, price_per_day=Decimal("18000.00")))

    assert updated.capacity == 450
    assert updated.price_per_day == Decimal("18000.00")
    hall.refresh_from_db()
    assert hall.name == "Royal Palace"
    assert hall.images == ["https://img.example.com/1.jpg"]


@pytest.mark.django_db
def test_update_hall_can_clear_images():
    hall = make_hall(images=["https://img.example.com/1.jpg"])

    update_hall(hall.pk, HallPatch(images=None))

    hall.refresh_from_db()
    assert hall.images is None


@pytest.mark.django_db
def test_update_hall_deactivation_respects_approved_bookings():
    hall = make_hall()
    make_booking(hall=hall, status=Booking.Status.APPROVED)

    with pytest.raises(HallHasApprovedBookings):
        update_hall(hall.pk, HallPatch(is_active=False))


@pytest.mark.django_db
def test_update_hall_price_does_not_touch_existing_bookings():
    hall = make_hall(price_per_day=Decimal("15000.00"))
    booking = make_booking(hall=hall)

    update_hall(hall.pk, HallPatch(price_per_day=Decimal("20000.00")))

    booking.refresh_from_db()
    assert booking.total_amount == Decimal("15000.00")


@pytest.mark.django_db
def test_update_unknown_hall():
    with pytest.raises(NotFound):
        update_hall(999999, HallPatch(name="Whatever"))


@pytest.mark.django_db
@pytest.mark.parametrize(
    "action",
    [
        lambda hall_id: deactivate_hall(hall_id),
        lambda hall_id: update_hall(hall_id, HallPatch(capacity=500)),
    ],
    ids=["deactivate", "update"],
)
def test_hall_changes_lock_hall_row(action):
    # та же блокировка строки зала, что берёт подтверждение брони
    hall = make_hall()

    with mock.patch.object(
        Hall.objects, "select_for_update", wraps=Hall.objects.select_for_update
    ) as select_for_update:
        action(hall.pk)

    select_for_update.assert_called_once_with()


@pytest.mark.django_db
def test_deactivated_hall_keeps_pending_booking_approvable():
    hall = make_hall()
    booking = make_booking(hall=hall)
    deactivate_hall(hall.pk)

    approved = update_booking_status(booking.pk, Booking.Status.APPROVED)

    assert approved.status == Booking.Status.APPROVED
    hall.refresh_from_db()
    assert hall.is_active is False

def test_patch_reports_only_set_fields():
    patch = HallPatch(name="Grand Hall", images=None)

    assert patch.changes() == {"name": "Grand Hall", "images": None}
    assert patch.location is UNSET


def test_has_amenities_is_case_insensitive_subset():
    hall = Hall(amenities=["AC", "Parking", "Catering"])

    assert hall.has_amenities(["ac", "parking"])
    assert hall.has_amenities([])
    assert not hall.has_amenities(["AC", "Pool"])

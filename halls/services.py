import logging
from dataclasses import dataclass, fields
from typing import Any

from django.db import transaction

from common.exceptions import (
    AlreadyDeactivated,
    HallHasApprovedBookings,
    NotFound,
)
from booking.models import Booking
from .models import Hall

logger = logging.getLogger(__name__)


class _Unset:
    """Маркер «поле не передано» (None у images — валидное значение)."""

    def __repr__(self):
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class HallPatch:
    """Частичное обновление зала: применяются только переданные поля."""

    name: Any = UNSET
    description: Any = UNSET
    location: Any = UNSET
    capacity: Any = UNSET
    price_per_day: Any = UNSET
    amenities: Any = UNSET
    contact_phone: Any = UNSET
    contact_email: Any = UNSET
    images: Any = UNSET
    is_active: Any = UNSET

    def changes(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


def get_hall(hall_id: int, for_update: bool = False) -> Hall:
    queryset = Hall.objects.select_for_update() if for_update else Hall.objects.all()
    hall = queryset.filter(pk=hall_id).first()
    if hall is None:
        raise NotFound("Marriage hall not found")
    return hall


def _ensure_no_approved_bookings(hall: Hall) -> None:
    if Booking.objects.filter(hall=hall, status=Booking.Status.APPROVED).exists():
        logger.warning("Hall %s has approved bookings, refusing to deactivate", hall.pk)
        raise HallHasApprovedBookings()


@transaction.atomic
def update_hall(hall_id: int, patch: HallPatch) -> Hall:
    # блокировка зала: одобрение брони берёт ту же блокировку
    hall = get_hall(hall_id, for_update=True)
    changes = patch.changes()

    # выключение через PATCH подчиняется тем же правилам, что и удаление
    if changes.get("is_active") is False and hall.is_active:
        _ensure_no_approved_bookings(hall)

    for field_name, value in changes.items():
        setattr(hall, field_name, value)

    hall.save(update_fields=[*changes.keys(), "updated_at"])
    logger.info("Hall %s updated: %s", hall.pk, ", ".join(changes) or "no fields")
    return hall


@transaction.atomic
def deactivate_hall(hall_id: int) -> dict:
    """
    Мягкое удаление зала:
    - зал должен существовать и быть активным
    - на зал не должно быть подтверждённых броней
    """
    hall = get_hall(hall_id, for_update=True)

    if not hall.is_active:
        raise AlreadyDeactivated()

    _ensure_no_approved_bookings(hall)

    hall.is_active = False
    hall.save(update_fields=["is_active", "updated_at"])

    logger.info("Hall %s deactivated", hall.pk)
    return {"success": True, "message": "Marriage hall deactivated successfully"}

"""Правила бронирования: доступность, создание, смена статуса, отмена, дашборд."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from common.exceptions import (
    AlreadyCancelled,
    Forbidden,
    HallAlreadyBooked,
    HallInactive,
    HallUnavailable,
    InvalidDate,
    NotFound,
    TooLateToCancel,
    ValidationFailed,
)
from halls.models import Hall
from users.models import User
from .models import Booking

logger = logging.getLogger(__name__)

# статусы, которые администратор может выставить вручную
ADMIN_STATUSES = (
    Booking.Status.APPROVED,
    Booking.Status.REJECTED,
    Booking.Status.CANCELLED,
)


@dataclass
class BookingRequest:
    user_id: int
    hall_id: int
    event_date: datetime
    guest_count: int
    contact_name: str
    contact_phone: str
    contact_email: str
    special_requirements: Optional[str] = None


@dataclass
class Availability:
    hall_id: int
    event_date: datetime
    is_available: bool
    conflicting_booking_id: Optional[int] = None


def _approved_bookings(hall_id: int, event_date):
    # при нескольких подтверждённых берём самую раннюю по id
    return Booking.objects.filter(
        hall_id=hall_id,
        event_date=event_date,
        status=Booking.Status.APPROVED,
    ).order_by("id")


def _get_booking(booking_id: int, for_update: bool = False) -> Booking:
    queryset = Booking.objects.select_for_update() if for_update else Booking.objects.all()
    booking = queryset.filter(pk=booking_id).first()
    if booking is None:
        raise NotFound("Booking not found")
    return booking


def check_availability(hall_id: int, event_date) -> Availability:
    """Зал свободен, если на эту дату нет подтверждённых броней."""
    conflict = _approved_bookings(hall_id, event_date).first()

    return Availability(
        hall_id=hall_id,
        event_date=event_date,
        is_available=conflict is None,
        conflicting_booking_id=conflict.pk if conflict else None,
    )


@transaction.atomic
def create_booking(request: BookingRequest) -> Booking:
    """
    Создание брони. Проверки по порядку:
    - дата события в будущем
    - пользователь и зал существуют
    - зал активен
    - на дату нет подтверждённой брони
    """
    if request.event_date <= timezone.now():
        raise InvalidDate()

    if not User.objects.filter(pk=request.user_id).exists():
        raise NotFound("User not found")

    # блокируем строку зала: параллельные брони на зал идут по очереди
    hall = Hall.objects.select_for_update().filter(pk=request.hall_id).first()
    if hall is None:
        raise NotFound("Marriage hall not found")

    if not hall.is_active:
        raise HallInactive()

    if _approved_bookings(hall.pk, request.event_date).exists():
        logger.warning(
            "Hall %s already has an approved booking on %s",
            hall.pk,
            request.event_date.isoformat(),
        )
        raise HallUnavailable()

    booking = Booking.objects.create(
        user_id=request.user_id,
        hall=hall,
        event_date=request.event_date,
        guest_count=request.guest_count,
        total_amount=hall.price_per_day,
        status=Booking.Status.PENDING,
        special_requirements=request.special_requirements,
        contact_name=request.contact_name,
        contact_phone=request.contact_phone,
        contact_email=request.contact_email,
    )

    logger.info("Booking %s created for hall %s", booking.pk, hall.pk)
    return booking


@transaction.atomic
def update_booking_status(booking_id: int, new_status: str) -> Booking:
    """
    Смена статуса администратором.
    Переходы не ограничиваются, проверяется только двойное подтверждение.
    """
    if new_status not in ADMIN_STATUSES:
        raise ValidationFailed(f"Unsupported booking status: {new_status}")

    booking = _get_booking(booking_id, for_update=True)

    if new_status == Booking.Status.APPROVED:
        # та же блокировка зала, что и при создании брони
        Hall.objects.select_for_update().filter(pk=booking.hall_id).first()

        if _approved_bookings(booking.hall_id, booking.event_date).exclude(pk=booking.pk).exists():
            logger.warning(
                "Booking %s not approved: hall %s is taken on %s",
                booking.pk,
                booking.hall_id,
                booking.event_date.isoformat(),
            )
            raise HallAlreadyBooked()

    booking.status = new_status

    try:
        with transaction.atomic():
            booking.save(update_fields=["status", "updated_at"])
    except IntegrityError:
        # уникальный индекс поймал параллельное подтверждение
        logger.warning("Booking %s lost an approval race", booking.pk)
        raise HallAlreadyBooked()

    logger.info("Booking %s status set to %s", booking.pk, new_status)
    return booking


@transaction.atomic
def cancel_booking(booking_id: int, user_id: int) -> Booking:
    """Отмена брони самим пользователем (не позже чем за 24 часа)."""
    booking = _get_booking(booking_id, for_update=True)

    if booking.user_id != user_id:
        raise Forbidden()

    if booking.status == Booking.Status.CANCELLED:
        raise AlreadyCancelled()

    window_hours = settings.BOOKING_CANCELLATION_WINDOW_HOURS
    if booking.event_date - timezone.now() < timedelta(hours=window_hours):
        raise TooLateToCancel(
            f"Bookings can only be cancelled at least {window_hours} hours "
            "before the event date"
        )

    booking.status = Booking.Status.CANCELLED
    booking.save(update_fields=["status", "updated_at"])

    logger.info("Booking %s cancelled by user %s", booking.pk, user_id)
    return booking


def get_dashboard_stats() -> dict:
    """Сводка для админки, считается заново на каждый запрос."""
    halls = Hall.objects.aggregate(
        total_halls=Count("id"),
        active_halls=Count("id", filter=Q(is_active=True)),
    )

    recent_since = timezone.now() - timedelta(days=settings.DASHBOARD_RECENT_DAYS)
    bookings = Booking.objects.aggregate(
        total_bookings=Count("id"),
        pending_bookings=Count("id", filter=Q(status=Booking.Status.PENDING)),
        approved_bookings=Count("id", filter=Q(status=Booking.Status.APPROVED)),
        rejected_bookings=Count("id", filter=Q(status=Booking.Status.REJECTED)),
        cancelled_bookings=Count("id", filter=Q(status=Booking.Status.CANCELLED)),
        total_revenue=Sum("total_amount", filter=Q(status=Booking.Status.APPROVED)),
        recent_bookings=Count("id", filter=Q(created_at__gte=recent_since)),
    )

    revenue = bookings["total_revenue"] or Decimal("0")
    bookings["total_revenue"] = revenue.quantize(Decimal("0.01"))

    return {**halls, **bookings}

"""Фабрики объектов для тестов всех приложений."""

from datetime import timedelta
from decimal import Decimal
from itertools import count

from django.utils import timezone

from users.models import User
from halls.models import Hall
from booking.models import Booking

_seq = count(1)


def make_user(**overrides) -> User:
    n = next(_seq)
    data = {
        "name": f"Customer {n}",
        "email": f"customer{n}@example.com",
        "phone": "+919800000000",
        "role": User.Role.USER,
    }
    data.update(overrides)
    return User.objects.create(**data)


def make_hall(**overrides) -> Hall:
    n = next(_seq)
    data = {
        "name": f"Royal Palace {n}",
        "description": "Spacious air-conditioned banquet hall",
        "location": "Banjara Hills, Hyderabad",
        "capacity": 500,
        "price_per_day": Decimal("15000.00"),
        "amenities": ["AC", "Parking", "Catering"],
        "contact_phone": "+914000000000",
        "contact_email": f"hall{n}@example.com",
        "images": None,
        "is_active": True,
    }
    data.update(overrides)
    return Hall.objects.create(**data)


def future_date(days=30, hour=18):
    event = timezone.now() + timedelta(days=days)
    return event.replace(hour=hour, minute=0, second=0, microsecond=0)


def make_booking(user=None, hall=None, **overrides) -> Booking:
    user = user or make_user()
    hall = hall or make_hall()
    data = {
        "user": user,
        "hall": hall,
        "event_date": future_date(),
        "guest_count": 200,
        "total_amount": hall.price_per_day,
        "status": Booking.Status.PENDING,
        "special_requirements": None,
        "contact_name": user.name,
        "contact_phone": user.phone,
        "contact_email": user.email,
    }
    data.update(overrides)
    return Booking.objects.create(**data)

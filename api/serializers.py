from decimal import Decimal

from rest_framework import serializers

from users.models import User
from halls.models import Hall
from booking.models import Booking
from booking.services import ADMIN_STATUSES


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "role",
            "created_at",
        ]
        read_only_fields = ["created_at"]
        extra_kwargs = {
            "name": {"min_length": 2},
            "phone": {"min_length": 10},
        }


class HallSerializer(serializers.ModelSerializer):
    price_per_day = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
    )
    amenities = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    images = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True, default=None
    )

    class Meta:
        model = Hall
        fields = [
            "id",
            "name",
            "description",
            "location",
            "capacity",
            "price_per_day",
            "amenities",
            "contact_phone",
            "contact_email",
            "images",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]
        extra_kwargs = {
            "name": {"min_length": 3},
            "description": {"min_length": 10},
            "location": {"min_length": 5},
            "capacity": {"min_value": 1},
            "contact_phone": {"min_length": 10},
        }


class BookingSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    hall_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "hall_id",
            "event_date",
            "guest_count",
            "total_amount",
            "status",
            "special_requirements",
            "contact_name",
            "contact_phone",
            "contact_email",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """
    Входные данные брони. Существование пользователя/зала и дату
    проверяет booking.services.create_booking.
    """

    user_id = serializers.IntegerField()
    hall_id = serializers.IntegerField()
    event_date = serializers.DateTimeField()
    guest_count = serializers.IntegerField(min_value=1)
    special_requirements = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    contact_name = serializers.CharField(min_length=2, max_length=150)
    contact_phone = serializers.CharField(min_length=10, max_length=50)
    contact_email = serializers.EmailField()


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[s.value for s in ADMIN_STATUSES])


class BookingCancelSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()


class AvailabilityQuerySerializer(serializers.Serializer):
    event_date = serializers.DateTimeField()


class AvailabilitySerializer(serializers.Serializer):
    hall_id = serializers.IntegerField()
    event_date = serializers.DateTimeField()
    is_available = serializers.BooleanField()
    conflicting_booking_id = serializers.IntegerField(allow_null=True)


class DashboardStatsSerializer(serializers.Serializer):
    total_halls = serializers.IntegerField()
    active_halls = serializers.IntegerField()
    total_bookings = serializers.IntegerField()
    pending_bookings = serializers.IntegerField()
    approved_bookings = serializers.IntegerField()
    rejected_bookings = serializers.IntegerField()
    cancelled_bookings = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    recent_bookings = serializers.IntegerField()

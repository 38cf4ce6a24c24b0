from django.utils import timezone
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.models import User
from halls.filters import HallFilter
from halls.models import Hall
from halls.services import HallPatch, deactivate_hall, update_hall
from booking.filters import BookingFilter
from booking.models import Booking
from booking import services as booking_services
from .serializers import (
    UserSerializer,
    HallSerializer,
    BookingSerializer,
    BookingCreateSerializer,
    BookingStatusSerializer,
    BookingCancelSerializer,
    AvailabilityQuerySerializer,
    AvailabilitySerializer,
    DashboardStatsSerializer,
)


class HealthcheckAPIView(APIView):
    def get(self, request):
        return Response({"status": "ok", "timestamp": timezone.now().isoformat()})


class UserListCreateAPIView(generics.ListCreateAPIView):
    """
    GET  /api/users/
    POST /api/users/
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer


# === Залы ===


class HallListCreateAPIView(generics.ListCreateAPIView):
    """
    GET  /api/halls/?location=&capacity_min=&capacity_max=&price_min=&price_max=&amenities=&is_active=
    POST /api/halls/
    """

    queryset = Hall.objects.all()
    serializer_class = HallSerializer
    filterset_class = HallFilter


class HallDetailAPIView(generics.RetrieveAPIView):
    """
    GET    /api/halls/<id>/
    PATCH  /api/halls/<id>/  — частичное обновление
    DELETE /api/halls/<id>/  — мягкое удаление (is_active = False)
    """

    queryset = Hall.objects.all()
    serializer_class = HallSerializer

    def patch(self, request, pk: int):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        hall = update_hall(pk, HallPatch(**serializer.validated_data))
        return Response(self.get_serializer(hall).data)

    def delete(self, request, pk: int):
        return Response(deactivate_hall(pk))


class HallAvailabilityAPIView(APIView):
    """
    GET /api/halls/<id>/availability/?event_date=2026-12-01T18:00:00Z
    """

    def get(self, request, pk: int):
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        availability = booking_services.check_availability(
            hall_id=pk,
            event_date=query.validated_data["event_date"],
        )
        return Response(AvailabilitySerializer(availability).data)


# === Брони ===


class BookingListCreateAPIView(generics.ListCreateAPIView):
    """
    GET  /api/bookings/?user_id=&hall_id=&status=&date_from=&date_to=
    POST /api/bookings/
    """

    queryset = Booking.objects.all()
    serializer_class = BookingSerializer
    filterset_class = BookingFilter

    def create(self, request, *args, **kwargs):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_services.create_booking(
            booking_services.BookingRequest(**serializer.validated_data)
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailAPIView(generics.RetrieveAPIView):
    """
    GET /api/bookings/<id>/
    """

    serializer_class = BookingSerializer
    queryset = Booking.objects.all()


class BookingCancelAPIView(APIView):
    """
    POST /api/bookings/<id>/cancel/
    body: { "user_id": 1 }
    """

    def post(self, request, pk: int):
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_services.cancel_booking(pk, serializer.validated_data["user_id"])
        return Response(BookingSerializer(booking).data)


# === Админские экшены ===


class AdminBookingStatusAPIView(APIView):
    """
    POST /api/admin/bookings/<id>/status/
    body: { "status": "approved" | "rejected" | "cancelled" }
    """

    def post(self, request, pk: int):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_services.update_booking_status(pk, serializer.validated_data["status"])
        return Response(BookingSerializer(booking).data)


class AdminBookingConfirmAPIView(APIView):
    """
    POST /api/admin/bookings/<id>/confirm/
    """

    def post(self, request, pk: int):
        booking = booking_services.update_booking_status(pk, Booking.Status.APPROVED)
        return Response(BookingSerializer(booking).data)


class AdminBookingRejectAPIView(APIView):
    """
    POST /api/admin/bookings/<id>/reject/
    """

    def post(self, request, pk: int):
        booking = booking_services.update_booking_status(pk, Booking.Status.REJECTED)
        return Response(BookingSerializer(booking).data)


class AdminDashboardAPIView(APIView):
    """
    GET /api/admin/dashboard/
    """

    def get(self, request):
        stats = booking_services.get_dashboard_stats()
        return Response(DashboardStatsSerializer(stats).data)

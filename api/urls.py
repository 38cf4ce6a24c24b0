from django.urls import path

from .views import (
    HealthcheckAPIView,
    UserListCreateAPIView,
    HallListCreateAPIView,
    HallDetailAPIView,
    HallAvailabilityAPIView,
    BookingListCreateAPIView,
    BookingDetailAPIView,
    BookingCancelAPIView,
    AdminBookingStatusAPIView,
    AdminBookingConfirmAPIView,
    AdminBookingRejectAPIView,
    AdminDashboardAPIView,
)

app_name = "api"

urlpatterns = [
    path("healthcheck/", HealthcheckAPIView.as_view(), name="healthcheck"),

    # Публичные эндпоинты для фронта
    path("users/", UserListCreateAPIView.as_view(), name="user-list"),
    path("halls/", HallListCreateAPIView.as_view(), name="hall-list"),
    path("halls/<int:pk>/", HallDetailAPIView.as_view(), name="hall-detail"),
    path("halls/<int:pk>/availability/", HallAvailabilityAPIView.as_view(), name="hall-availability"),
    path("bookings/", BookingListCreateAPIView.as_view(), name="booking-list"),
    path("bookings/<int:pk>/", BookingDetailAPIView.as_view(), name="booking-detail"),
    path("bookings/<int:pk>/cancel/", BookingCancelAPIView.as_view(), name="booking-cancel"),

    # Админские
    path(
        "admin/bookings/<int:pk>/status/",
        AdminBookingStatusAPIView.as_view(),
        name="admin-booking-status",
    ),
    path(
        "admin/bookings/<int:pk>/confirm/",
        AdminBookingConfirmAPIView.as_view(),
        name="admin-booking-confirm",
    ),
    path(
        "admin/bookings/<int:pk>/reject/",
        AdminBookingRejectAPIView.as_view(),
        name="admin-booking-reject",
    ),
    path("admin/dashboard/", AdminDashboardAPIView.as_view(), name="admin-dashboard"),
]

import django_filters

from .models import Booking


class BookingFilter(django_filters.FilterSet):
    """
    GET /api/bookings/
    ?user_id= / hall_id= / status=
    ?date_from= / date_to=  — включительно, по event_date
    """

    user_id = django_filters.NumberFilter(field_name="user_id")
    hall_id = django_filters.NumberFilter(field_name="hall_id")
    status = django_filters.ChoiceFilter(field_name="status", choices=Booking.Status.choices)
    date_from = django_filters.IsoDateTimeFilter(field_name="event_date", lookup_expr="gte")
    date_to = django_filters.IsoDateTimeFilter(field_name="event_date", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = []

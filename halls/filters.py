import django_filters

from .models import Hall


class HallFilter(django_filters.FilterSet):
    """
    GET /api/halls/
    ?location=<подстрока, без учёта регистра>
    ?capacity_min= / capacity_max=
    ?price_min= / price_max=
    ?amenities=AC,Parking или ?amenities=AC&amenities=Parking  (зал должен иметь все)
    ?is_active=true|false
    """

    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    capacity_min = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    capacity_max = django_filters.NumberFilter(field_name="capacity", lookup_expr="lte")
    price_min = django_filters.NumberFilter(field_name="price_per_day", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price_per_day", lookup_expr="lte")
    amenities = django_filters.CharFilter(method="filter_amenities")
    is_active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Hall
        fields = []

    def requested_amenities(self, value):
        # форма отдаёт только последнее значение, повторы берём из сырых данных
        raw = self.data.getlist("amenities") if hasattr(self.data, "getlist") else [value]
        return [part.strip() for item in raw for part in str(item).split(",") if part.strip()]

    def filter_amenities(self, queryset, name, value):
        required = self.requested_amenities(value)
        if not required:
            return queryset

        # amenities лежат в JSON, переносимо фильтруем уже в Python
        matching_ids = [hall.pk for hall in queryset if hall.has_amenities(required)]
        return queryset.filter(pk__in=matching_ids)

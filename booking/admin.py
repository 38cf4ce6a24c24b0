from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "hall",
        "event_date",
        "contact_name",
        "guest_count",
        "status",
        "total_amount",
    )
    list_filter = ("hall", "status", "event_date")
    search_fields = ("contact_name", "contact_phone", "contact_email")
    readonly_fields = ("total_amount", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        # при создании из админки цена берётся из зала, как и в API
        if not change:
            obj.total_amount = obj.hall.price_per_day
        super().save_model(request, obj, form, change)

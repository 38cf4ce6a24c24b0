from django.contrib import admin
from .models import Hall


@admin.register(Hall)
class HallAdmin(admin.ModelAdmin):
    list_display = ("name", "location", "capacity", "price_per_day", "is_active")
    list_filter = ("is_active", "location")
    search_fields = ("name", "location", "contact_email")
    readonly_fields = ("created_at", "updated_at")

from django.db import models
from django.db.models import Q

from halls.models import Hall
from users.models import User


class Booking(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"
        CANCELLED = "cancelled", "Cancelled"

    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name="bookings")
    hall = models.ForeignKey(Hall, on_delete=models.PROTECT, related_name="bookings")

    event_date = models.DateTimeField()
    guest_count = models.PositiveIntegerField()

    # цена зала на момент создания брони, дальше не пересчитывается
    total_amount = models.DecimalField(max_digits=10, decimal_places=2)

    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.PENDING
    )

    special_requirements = models.TextField(null=True, blank=True)

    contact_name = models.CharField(max_length=150)
    contact_phone = models.CharField(max_length=50)
    contact_email = models.EmailField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            # не более одной подтверждённой брони на зал и дату
            models.UniqueConstraint(
                fields=["hall", "event_date"],
                condition=Q(status="approved"),
                name="unique_approved_booking_per_hall_date",
            ),
        ]

    def __str__(self):
        return f"{self.hall.name} {self.event_date:%Y-%m-%d} ({self.contact_name})"

from django.db import models


class Hall(models.Model):
    name = models.CharField(max_length=200)
    description = models.TextField()
    location = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField()
    price_per_day = models.DecimalField(max_digits=10, decimal_places=2)

    # список строк: ["AC", "Parking", ...]
    amenities = models.JSONField(default=list, blank=True)

    contact_phone = models.CharField(max_length=50)
    contact_email = models.EmailField()

    # только URL'ы картинок, сами файлы не храним
    images = models.JSONField(null=True, blank=True)

    # мягкое удаление: зал выключается, история броней остаётся
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name

    def has_amenities(self, required) -> bool:
        """Все запрошенные удобства есть у зала (без учёта регистра)."""
        own = {str(a).strip().lower() for a in (self.amenities or [])}
        return all(str(r).strip().lower() in own for r in required)

"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    latitude = models.DecimalField(max_digits=9, decimal_places=6)
    longitude = models.DecimalField(max_digits=9, decimal_places=6)
    date = models.DateTimeField(blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    banner = models.CharField(max_length=500, blank=True, null=True)
    flyers = models.JSONField(default=list, blank=True)
    coupons = models.JSONField(default=list, blank=True)
    city = models.CharField(max_length=255, blank=True, default="")
    formatted_address = models.CharField(max_length=500, blank=True, default="")
    participants = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"]),
            models.Index(fields=["date"]),
            models.Index(fields=["city"]),
            models.Index(fields=["latitude", "longitude"]),
        ]

    def __str__(self) -> str:
        return self.title


class PriceTier(models.Model):
    """Persistence model for an event's price tiers."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="price_tiers"
    )
    position = models.PositiveIntegerField()
    label = models.CharField(max_length=100, blank=True, default="")
    amount = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["event", "amount"]),
        ]

    def __str__(self) -> str:
        return f"{self.label or self.event.title} - {self.amount}"


class EventCategory(models.Model):
    """Persistence model for an event's category tags."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="category_tags"
    )
    name = models.CharField(max_length=100)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["event", "name"], name="unique_event_category"
            ),
        ]
        indexes = [
            models.Index(fields=["name"]),
        ]
        verbose_name_plural = "event categories"

    def __str__(self) -> str:
        return self.name

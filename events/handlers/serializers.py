"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from events.domain import EventCriteria, EventDraft, Location, PriceTier


class LocationSerializer(serializers.Serializer):
    """Serializer for Location value object."""

    latitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, min_value=-90, max_value=90
    )
    longitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, min_value=-180, max_value=180
    )


class PriceTierSerializer(serializers.Serializer):
    """Serializer for PriceTier value object."""

    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    label = serializers.CharField(required=False, allow_blank=True, default="")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    location = LocationSerializer()
    date = serializers.DateTimeField(allow_null=True)
    description = serializers.CharField(allow_null=True)
    categories = serializers.SerializerMethodField()
    banner = serializers.CharField(allow_null=True)
    flyers = serializers.SerializerMethodField()
    coupons = serializers.SerializerMethodField()
    price = PriceTierSerializer(many=True)
    city = serializers.CharField()
    formatted_address = serializers.CharField()
    participants = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_categories(self, event) -> list[str]:
        return sorted(event.categories)

    def get_flyers(self, event) -> list[str]:
        return sorted(event.flyers)

    def get_coupons(self, event) -> list[str]:
        return sorted(event.coupons)

    def get_participants(self, event) -> list[str]:
        return sorted(event.participants)


class EventCreateSerializer(serializers.Serializer):
    """Validates a new event payload and builds an EventDraft."""

    title = serializers.CharField(max_length=255)
    location = LocationSerializer()
    date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    categories = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )
    banner = serializers.CharField(
        max_length=500, required=False, allow_null=True, default=None
    )
    flyers = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    coupons = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    price = PriceTierSerializer(many=True, required=False, default=list)
    city = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )
    formatted_address = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data["title"],
            location=Location(**data["location"]),
            date=data["date"],
            description=data["description"],
            categories=frozenset(data["categories"]),
            banner=data["banner"],
            flyers=frozenset(data["flyers"]),
            coupons=frozenset(data["coupons"]),
            price=tuple(PriceTier(**tier) for tier in data["price"]),
            city=data["city"],
            formatted_address=data["formatted_address"],
        )


class EventCriteriaSerializer(serializers.Serializer):
    """Parses search query parameters into EventCriteria."""

    name = serializers.CharField(required=False)
    date = serializers.DateTimeField(required=False)
    category = serializers.CharField(required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    latitude = serializers.DecimalField(max_digits=9, decimal_places=6, required=False)
    longitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False
    )
    radius = serializers.DecimalField(
        max_digits=9, decimal_places=6, min_value=0, required=False
    )

    def to_criteria(self) -> EventCriteria:
        return EventCriteria(**self.validated_data)


class MainEventsQuerySerializer(serializers.Serializer):
    date = serializers.DateTimeField(required=False)


class ParticipantSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)

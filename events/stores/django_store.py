"""Django ORM implementation of the EventStore.

Price tiers and category tags are child rows, so every filter clause maps to
a plain lookup or an ``Exists`` subquery on the event queryset.
"""

import logging
from datetime import datetime

from django.db import models, transaction
from django.db.models import Exists, OuterRef, Q

from events import models as orm
from events.domain import (
    Event,
    EventDraft,
    EventFilter,
    EventId,
    Location,
    PriceTier,
    UpdateResult,
)
from events.domain.filters import (
    MAIN_EVENTS_LIMIT,
    CheapestPriceAtLeast,
    Clause,
    HasCategory,
    OccursOnOrAfter,
    TitleContains,
    WithinBoundingBox,
    ensure_aware,
    one_month_after,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM.

    The event model is handed in by whoever composes the store; the tier and
    category models are reached through its reverse relations.
    """

    def __init__(self, event_model: type[orm.Event]) -> None:
        self._model = event_model
        self._tier_model = event_model._meta.get_field("price_tiers").related_model
        self._category_model = event_model._meta.get_field(
            "category_tags"
        ).related_model

    def add(self, draft: EventDraft) -> Event:
        with transaction.atomic():
            record = self._model.objects.create(**self._record_fields(draft))
            self._write_children(record, draft)
        logger.debug("Stored event %s", record.pk)
        return self._to_domain(self._queryset().get(pk=record.pk))

    def find_by_id(self, event_id: EventId) -> Event | None:
        record = self._queryset().filter(pk=event_id.value).first()
        return self._to_domain(record) if record else None

    def find_by_location_and_date(
        self, location: Location, date: datetime | None
    ) -> Event | None:
        record = (
            self._queryset()
            .filter(
                latitude=location.latitude,
                longitude=location.longitude,
                date=date,
            )
            .first()
        )
        return self._to_domain(record) if record else None

    def find_by_city(self, city: str) -> list[Event]:
        return self._fetch(self._queryset().filter(city=city))

    def find_by_category(self, category: str) -> list[Event]:
        return self.filter_by(EventFilter((HasCategory(category),)))

    def find_by_name(self, name: str) -> list[Event]:
        return self._fetch(self._queryset().filter(title__icontains=name))

    def filter_by(self, event_filter: EventFilter) -> list[Event]:
        conditions = []
        for clause in event_filter.clauses:
            conditions.extend(self._conditions(clause))
        logger.debug("Filtering events with %d conditions", len(conditions))
        return self._fetch(self._queryset().filter(*conditions))

    def find_main(self, date: datetime) -> list[Event]:
        date = ensure_aware(date)
        queryset = (
            self._queryset()
            .filter(date__gte=date, date__lte=one_month_after(date))
            .order_by("date")
        )
        return self._fetch(queryset[:MAIN_EVENTS_LIMIT])

    def update(self, event_id: EventId, draft: EventDraft) -> UpdateResult:
        with transaction.atomic():
            record = self._queryset().filter(pk=event_id.value).first()
            if record is None:
                return UpdateResult(matched_count=0, modified_count=0)
            if self._to_domain(record).to_draft() == draft:
                return UpdateResult(matched_count=1, modified_count=0)

            for name, value in self._record_fields(draft).items():
                setattr(record, name, value)
            record.save()
            record.price_tiers.all().delete()
            record.category_tags.all().delete()
            self._write_children(record, draft)
        logger.debug("Replaced event %s", record.pk)
        return UpdateResult(matched_count=1, modified_count=1)

    def _queryset(self) -> models.QuerySet:
        return self._model.objects.prefetch_related("price_tiers", "category_tags")

    def _conditions(self, clause: Clause) -> list:
        match clause:
            case TitleContains(text=text):
                return [Q(title__icontains=text)]
            case OccursOnOrAfter(moment=moment):
                return [Q(date__gte=moment)]
            case HasCategory(category=category):
                return [
                    Exists(
                        self._category_model.objects.filter(
                            event=OuterRef("pk"), name=category
                        )
                    )
                ]
            case CheapestPriceAtLeast(floor=floor):
                # Cheapest tier >= floor means no tier sits below it.
                tiers = self._tier_model.objects.filter(event=OuterRef("pk"))
                conditions = [~Exists(tiers.filter(amount__lt=floor))]
                if floor > 0:
                    # No tiers counts as free.
                    conditions.append(Exists(tiers))
                return conditions
            case WithinBoundingBox():
                return [
                    Q(
                        latitude__gte=clause.min_latitude,
                        latitude__lte=clause.max_latitude,
                        longitude__gte=clause.min_longitude,
                        longitude__lte=clause.max_longitude,
                    )
                ]
        raise TypeError(f"Unsupported filter clause: {clause!r}")

    def _write_children(self, record: orm.Event, draft: EventDraft) -> None:
        self._tier_model.objects.bulk_create(
            self._tier_model(
                event=record, position=position, label=tier.label, amount=tier.amount
            )
            for position, tier in enumerate(draft.price)
        )
        self._category_model.objects.bulk_create(
            self._category_model(event=record, name=name)
            for name in sorted(draft.categories)
        )

    @staticmethod
    def _record_fields(draft: EventDraft) -> dict:
        return {
            "title": draft.title,
            "latitude": draft.location.latitude,
            "longitude": draft.location.longitude,
            "date": draft.date,
            "description": draft.description,
            "banner": draft.banner,
            "flyers": sorted(draft.flyers),
            "coupons": sorted(draft.coupons),
            "city": draft.city,
            "formatted_address": draft.formatted_address,
            "participants": sorted(draft.participants),
        }

    def _fetch(self, queryset: models.QuerySet) -> list[Event]:
        return [self._to_domain(record) for record in queryset]

    @staticmethod
    def _to_domain(record: orm.Event) -> Event:
        return Event(
            id=EventId(record.id),
            title=record.title,
            location=Location(latitude=record.latitude, longitude=record.longitude),
            date=record.date,
            description=record.description,
            categories=frozenset(tag.name for tag in record.category_tags.all()),
            banner=record.banner,
            flyers=frozenset(record.flyers),
            coupons=frozenset(record.coupons),
            price=tuple(
                PriceTier(amount=tier.amount, label=tier.label)
                for tier in record.price_tiers.all()
            ),
            city=record.city,
            formatted_address=record.formatted_address,
            participants=frozenset(record.participants),
            created_at=record.created_at,
        )

"""Search criteria and the filters composed from them.

A criteria value has every field optional. ``compose_filter`` turns it into an
``EventFilter``: the conjunction of one clause per supplied criterion. Absent
criteria contribute no clause, so an empty criteria value matches every event.

Clauses can evaluate themselves against a domain Event (used by in-memory
stores); ORM-backed stores translate them into query expressions instead.
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from events.domain.models import EventDraft

MAIN_EVENTS_LIMIT = 4


def ensure_aware(moment: datetime) -> datetime:
    """Read naive datetimes as UTC so they compare with stored aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class EventCriteria:
    """Optional search criteria for events."""

    name: str | None = None
    date: datetime | None = None
    category: str | None = None
    price: Decimal | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    radius: Decimal | None = None

    def __post_init__(self) -> None:
        if self.date is not None:
            object.__setattr__(self, "date", ensure_aware(self.date))

    @property
    def has_area(self) -> bool:
        return (
            self.latitude is not None
            and self.longitude is not None
            and self.radius is not None
        )


@dataclass(frozen=True)
class TitleContains:
    text: str

    def matches(self, event: EventDraft) -> bool:
        return self.text.lower() in event.title.lower()


@dataclass(frozen=True)
class OccursOnOrAfter:
    moment: datetime

    def matches(self, event: EventDraft) -> bool:
        if event.date is None:
            return False
        return ensure_aware(event.date) >= ensure_aware(self.moment)


@dataclass(frozen=True)
class HasCategory:
    category: str

    def matches(self, event: EventDraft) -> bool:
        return self.category in event.categories


@dataclass(frozen=True)
class CheapestPriceAtLeast:
    """Cheapest tier must reach the floor. Events without tiers count as free."""

    floor: Decimal

    def matches(self, event: EventDraft) -> bool:
        cheapest = event.cheapest_price
        amount = cheapest.amount if cheapest is not None else Decimal(0)
        return amount >= self.floor


@dataclass(frozen=True)
class WithinBoundingBox:
    """Square area around a center point, inclusive on both axes.

    This approximates a radius search; it is not a circular distance check.
    """

    min_latitude: Decimal
    max_latitude: Decimal
    min_longitude: Decimal
    max_longitude: Decimal

    @classmethod
    def around(
        cls, latitude: Decimal, longitude: Decimal, radius: Decimal
    ) -> "WithinBoundingBox":
        return cls(
            min_latitude=latitude - radius,
            max_latitude=latitude + radius,
            min_longitude=longitude - radius,
            max_longitude=longitude + radius,
        )

    def matches(self, event: EventDraft) -> bool:
        location = event.location
        return (
            self.min_latitude <= location.latitude <= self.max_latitude
            and self.min_longitude <= location.longitude <= self.max_longitude
        )


Clause = (
    TitleContains
    | OccursOnOrAfter
    | HasCategory
    | CheapestPriceAtLeast
    | WithinBoundingBox
)


@dataclass(frozen=True)
class EventFilter:
    """Conjunction of clauses. An empty filter matches everything."""

    clauses: tuple[Clause, ...] = ()

    def matches(self, event: EventDraft) -> bool:
        return all(clause.matches(event) for clause in self.clauses)


def compose_filter(criteria: EventCriteria) -> EventFilter:
    """Build the filter for a criteria value, skipping absent fields.

    An omitted price leaves the floor at zero, which every event satisfies
    since tier amounts are non-negative, so it produces no clause.
    """
    clauses: list[Clause] = []
    if criteria.name:
        clauses.append(TitleContains(criteria.name))
    if criteria.date is not None:
        clauses.append(OccursOnOrAfter(criteria.date))
    if criteria.category:
        clauses.append(HasCategory(criteria.category))
    if criteria.price is not None:
        clauses.append(CheapestPriceAtLeast(criteria.price))
    if criteria.has_area:
        clauses.append(
            WithinBoundingBox.around(
                criteria.latitude, criteria.longitude, criteria.radius
            )
        )
    return EventFilter(tuple(clauses))


def one_month_after(moment: datetime) -> datetime:
    """Same day and time one calendar month later.

    Days past the end of the target month are clamped to its last day, so
    Jan 31 becomes Feb 28 (or 29). The span is roughly, not exactly, 30 days.
    """
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)

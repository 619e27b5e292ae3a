"""Catalog query engine.

Pure functions that turn a sequence of events into filtered, sorted
result sets. Nothing here raises: a filter that matches nothing returns
an empty list.

Filters compose conjunctively. ``run_query`` applies search, then
category, then price range, each to the previous stage's output, and
sorts what is left.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from events.domain.models import Event

ALL_CATEGORIES = "all"


class SortCriterion(Enum):
    """Result orderings offered by the storefront."""

    DATE = "date"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    POPULARITY = "popularity"


@dataclass(frozen=True)
class CatalogQuery:
    """Query parameters for a single catalog read."""

    search: str = ""
    category: str = ALL_CATEGORIES
    min_price: Decimal = Decimal("0")
    max_price: Decimal = Decimal("1000")
    sort: SortCriterion = SortCriterion.DATE


def _searchable_fields(event: Event) -> tuple[str, ...]:
    return (event.title, event.description, event.venue, event.category)


def text_search(query: str, events: Iterable[Event]) -> list[Event]:
    """Case-insensitive substring match on title, description, venue and category.

    A blank query returns every event in input order. Any other query is
    matched as given, surrounding whitespace included.
    """
    if not (query or "").strip():
        return list(events)
    term = query.casefold()
    return [
        event
        for event in events
        if any(term in field.casefold() for field in _searchable_fields(event))
    ]


def by_category(category: str, events: Iterable[Event]) -> list[Event]:
    """Case-insensitive exact match on category; ``"all"`` keeps everything."""
    wanted = (category or ALL_CATEGORIES).strip().casefold()
    if wanted == ALL_CATEGORIES:
        return list(events)
    return [event for event in events if event.category.casefold() == wanted]


def by_price_range(
    min_price: Decimal, max_price: Decimal, events: Iterable[Event]
) -> list[Event]:
    """Events priced within ``[min_price, max_price]``."""
    low, high = Decimal(min_price), Decimal(max_price)
    return [event for event in events if low <= event.price.amount <= high]


def by_id(event_id: str, events: Iterable[Event]) -> Event | None:
    """Exact id match, or None."""
    for event in events:
        if event.id.value == event_id:
            return event
    return None


def featured(events: Iterable[Event]) -> list[Event]:
    return [event for event in events if event.featured]


def categories(events: Iterable[Event]) -> list[str]:
    """Distinct categories in first-seen order."""
    seen: dict[str, None] = {}
    for event in events:
        seen.setdefault(event.category, None)
    return list(seen)


_SORT_KEYS = {
    SortCriterion.DATE: (lambda event: event.starts_at, False),
    SortCriterion.PRICE_LOW: (lambda event: event.price, False),
    SortCriterion.PRICE_HIGH: (lambda event: event.price, True),
    SortCriterion.POPULARITY: (lambda event: event.available_tickets, True),
}


def sort_events(criterion: SortCriterion, events: Iterable[Event]) -> list[Event]:
    """Stable sort; events with equal keys keep their input order."""
    key, reverse = _SORT_KEYS[criterion]
    return sorted(events, key=key, reverse=reverse)


def run_query(query: CatalogQuery, events: Sequence[Event]) -> list[Event]:
    """Apply every filter in ``query`` and sort the survivors."""
    matched = text_search(query.search, events)
    matched = by_category(query.category, matched)
    matched = by_price_range(query.min_price, query.max_price, matched)
    return sort_events(query.sort, matched)

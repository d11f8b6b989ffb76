"""
Summaries derived from an event list.

All functions are pure: they read the events and never modify them.
Categories outside the configured table are ignored so that stale labels
do not break the counters.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from ..domain.categories import CategoryTable
from ..domain.entities import Bounds, CategoryStats, Event


def count_by_type(events: Iterable[Event], categories: CategoryTable) -> Dict[str, int]:
    """
    One counter per configured category, zero when nothing matched.
    """
    counts = {name: 0 for name in categories.names}
    for event in events:
        if event.event_type in counts:
            counts[event.event_type] += 1
    return counts


def most_recent(events: Sequence[Event]) -> Optional[Event]:
    """
    Event with the latest detected_at, or None for an empty list.
    On equal timestamps the earliest event in the sequence wins.
    """
    latest: Optional[Event] = None
    for event in events:
        if latest is None or event.detected_at > latest.detected_at:
            latest = event
    return latest


def category_stats(events: Iterable[Event], categories: CategoryTable) -> Dict[str, CategoryStats]:
    """Count and mean confidence per configured category."""
    confidences = defaultdict(list)
    for event in events:
        if event.event_type in categories:
            confidences[event.event_type].append(event.confidence)

    stats = {}
    for name in categories.names:
        values = confidences.get(name, [])
        avg = sum(values) / len(values) if values else 0.0
        stats[name] = CategoryStats(count=len(values), avg_confidence=avg)
    return stats


def filter_by_categories(events: Iterable[Event], enabled: Iterable[str]) -> List[Event]:
    """Keeps only events whose category is switched on."""
    allowed = set(enabled)
    return [e for e in events if e.event_type in allowed]


def event_bounds(events: Iterable[Event]) -> Optional[Bounds]:
    """
    South-west and north-east corners enclosing all events, for fitting a map view.
    """
    lats = []
    lons = []
    for event in events:
        lats.append(event.lat)
        lons.append(event.lon)
    if not lats:
        return None
    return (min(lats), min(lons)), (max(lats), max(lons))

"""
Event category table.

The set of categories is configuration: the same simulator and aggregator
serve the New Zealand camera map (fire, dense/sparse traffic, accident)
and the city view (traffic, construction, accident, flood).
"""
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class EventCategory:
    name: str
    label: str
    color: str
    icon: str


class CategoryTable:
    """
    Ordered, read-only collection of event categories.
    """

    def __init__(self, categories: List[EventCategory]):
        if not categories:
            raise ValueError("A category table needs at least one category")
        names = [c.name for c in categories]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate category names: {names}")
        self._categories: Tuple[EventCategory, ...] = tuple(categories)
        self._by_name = {c.name: c for c in self._categories}

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> "CategoryTable":
        """
        Builds a table from {name: {label, color, icon}}, e.g. cfg.categories.
        """
        categories = []
        for name, entry in table.items():
            categories.append(EventCategory(
                name=str(name),
                label=str(entry.get("label") or name),
                color=str(entry.get("color") or "#6b7280"),
                icon=str(entry.get("icon") or ""),
            ))
        return cls(categories)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self._categories)

    def get(self, name: str) -> Optional[EventCategory]:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[EventCategory]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"CategoryTable({list(self.names)})"


NZ_CATEGORIES = CategoryTable([
    EventCategory("fire", "Fire", "#ef4444", "🔥"),
    EventCategory("dense_traffic", "Dense Traffic", "#f97316", "🚗"),
    EventCategory("sparse_traffic", "Sparse Traffic", "#22c55e", "🛣️"),
    EventCategory("accident", "Accident", "#a855f7", "🚑"),
])


URBAN_CATEGORIES = CategoryTable([
    EventCategory("traffic", "Traffic", "#ef4444", "🚦"),
    EventCategory("construction", "Construction", "#f97316", "🚧"),
    EventCategory("accident", "Accident", "#a855f7", "🚑"),
    EventCategory("flood", "Flood", "#3b82f6", "🌊"),
])

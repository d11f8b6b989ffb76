from .entities import Camera, Event, CategoryStats, DashboardSnapshot, Bounds
from .categories import EventCategory, CategoryTable, NZ_CATEGORIES, URBAN_CATEGORIES
from .protocols import RandomSource, Clock, CameraSource

__all__ = [
    "Camera",
    "Event",
    "CategoryStats",
    "DashboardSnapshot",
    "Bounds",
    "EventCategory",
    "CategoryTable",
    "NZ_CATEGORIES",
    "URBAN_CATEGORIES",
    "RandomSource",
    "Clock",
    "CameraSource",
]

"""
Domain entities for the event monitor.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Camera:
    """
    A camera location. Loaded once and never modified.
    """
    id: str
    name: str
    lat: float
    lon: float
    region: Optional[str] = None
    direction: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class Event:
    """
    A synthetic detection on one camera, regenerated on every refresh.
    """
    camera: Camera
    event_type: str
    confidence: float
    detected_at: datetime

    @property
    def id(self) -> str:
        return self.camera.id

    @property
    def name(self) -> str:
        return self.camera.name

    @property
    def lat(self) -> float:
        return self.camera.lat

    @property
    def lon(self) -> float:
        return self.camera.lon


@dataclass(frozen=True)
class CategoryStats:
    """Per-category count and mean confidence."""
    count: int = 0
    avg_confidence: float = 0.0


Bounds = Tuple[Tuple[float, float], Tuple[float, float]]


@dataclass
class DashboardSnapshot:
    """
    Everything a consumer needs after one refresh.
    Replaced wholesale on every refresh.
    """
    events: List[Event]
    counts: Dict[str, int]
    stats: Dict[str, CategoryStats]
    most_recent: Optional[Event]
    updated_at: Optional[datetime]
    camera_count: int

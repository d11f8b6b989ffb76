from .camera import CameraRecord
from .event import EventPayload, CategoryInfo, CategorySummary

__all__ = [
    "CameraRecord",
    "EventPayload",
    "CategoryInfo",
    "CategorySummary",
]

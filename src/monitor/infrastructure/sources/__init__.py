"""
Camera sources.
"""
from .camera_source import JsonCameraSource, StaticCameraSource, normalize_camera_payload, parse_cameras

__all__ = [
    "JsonCameraSource",
    "StaticCameraSource",
    "normalize_camera_payload",
    "parse_cameras",
]

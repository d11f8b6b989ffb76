"""
Camera list loading.

Two layouts of the camera file are accepted:

* flat: ``[{"id": ..., "lat": ..., "lon": ...}, ...]``
* nested: ``[{"cameras": [{"key": ..., "latitude": ..., "longitude": ...}]}]``

Both are normalized to flat records carrying ``key``, ``lat`` and ``lon``
before validation. Read or parse failures never propagate: the loader logs
them and returns an empty list.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import ValidationError

from ....common.exceptions import CameraSourceError
from ....common.logging import setup_logger
from ....common.schemas.camera import CameraRecord
from ...domain.entities import Camera

logger = setup_logger(__name__)


def _first_present(record: Dict[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def normalize_camera_payload(data: Any) -> List[Dict[str, Any]]:
    """
    Flattens either accepted layout into a list of camera dicts.
    Anything else yields an empty list.
    """
    if not isinstance(data, list) or not data:
        return []

    first = data[0]
    if isinstance(first, dict) and first.get("cameras"):
        nested = first["cameras"]
        if not isinstance(nested, list):
            return []
        return [
            {
                **cam,
                "lat": _first_present(cam, "latitude", "lat"),
                "lon": _first_present(cam, "longitude", "lon"),
                "key": _first_present(cam, "key", "id"),
            }
            for cam in nested
            if isinstance(cam, dict)
        ]

    return [
        {
            **cam,
            "lat": _first_present(cam, "lat", "latitude"),
            "lon": _first_present(cam, "lon", "longitude"),
            "key": _first_present(cam, "id", "key"),
        }
        for cam in data
        if isinstance(cam, dict)
    ]


def parse_cameras(records: Iterable[Dict[str, Any]]) -> List[Camera]:
    """
    Validates normalized records and converts them to Camera entities.
    Invalid records and repeated identifiers are skipped.
    """
    cameras: List[Camera] = []
    seen = set()
    for index, raw in enumerate(records):
        try:
            record = CameraRecord.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Skipping camera #{index}: {e.error_count()} validation error(s)")
            continue

        if record.key in seen:
            logger.warning(f"Skipping duplicate camera id {record.key}")
            continue
        seen.add(record.key)

        cameras.append(Camera(
            id=record.key,
            name=record.name or record.key,
            lat=record.lat,
            lon=record.lon,
            region=record.region,
            direction=record.direction,
            extra=dict(record.model_extra or {}),
        ))
    return cameras


class JsonCameraSource:
    """
    Reads the static camera list from a JSON file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Any:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CameraSourceError(f"Cannot read camera list {self.path}: {e}") from e

    def load(self) -> List[Camera]:
        try:
            data = self._read()
        except CameraSourceError as e:
            logger.error(f"Error loading cameras: {e}")
            return []

        cameras = parse_cameras(normalize_camera_payload(data))
        logger.info(f"Loaded {len(cameras)} cameras from {self.path}")
        return cameras


class StaticCameraSource:
    """Serves a camera list that is already in memory."""

    def __init__(self, cameras: Sequence[Camera]):
        self._cameras = tuple(cameras)

    def load(self) -> List[Camera]:
        return list(self._cameras)

from pathlib import Path
from typing import Optional, Union

from omegaconf import DictConfig

from ...common.logging import setup_logger
from ..domain.categories import CategoryTable
from ..domain.protocols import CameraSource, Clock
from ..infrastructure.broadcast.realtime_broadcaster import RealtimeBroadcaster
from ..infrastructure.sources.camera_source import JsonCameraSource
from .services.refresh import RefreshService
from .simulator import EventSimulator

logger = setup_logger(__name__)


class MonitorApplicationBuilder:
    """
    Builder pattern for constructing the refresh service from a monitor config.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig, base_dir: Union[str, Path, None] = None, clock: Optional[Clock] = None):
        self.config = config
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.clock = clock

        # Components
        self.categories: Optional[CategoryTable] = None
        self.source: Optional[CameraSource] = None
        self.simulator: Optional[EventSimulator] = None
        self.broadcaster: Optional[RealtimeBroadcaster] = None
        self.service: Optional[RefreshService] = None

    def build_categories(self) -> 'MonitorApplicationBuilder':
        self.categories = CategoryTable.from_mapping(self.config.categories)
        logger.info(f"Event categories: {', '.join(self.categories.names)}")
        return self

    def build_source(self, source: Optional[CameraSource] = None) -> 'MonitorApplicationBuilder':
        if source is not None:
            self.source = source
            return self
        path = Path(self.config.source.cameras_path)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        logger.info(f"Camera list: {path}")
        self.source = JsonCameraSource(path)
        return self

    def build_simulator(self) -> 'MonitorApplicationBuilder':
        if self.categories is None:
            self.build_categories()
        self.simulator = EventSimulator.from_config(self.config, self.categories, clock=self.clock)
        return self

    def build_broadcaster(self) -> 'MonitorApplicationBuilder':
        self.broadcaster = RealtimeBroadcaster()
        return self

    def build_service(self) -> RefreshService:
        if self.categories is None:
            self.build_categories()
        if self.source is None:
            self.build_source()
        if self.simulator is None:
            self.build_simulator()

        self.service = RefreshService(
            source=self.source,
            simulator=self.simulator,
            categories=self.categories,
            broadcaster=self.broadcaster,
            refresh_delay=self.config.refresh.delay_seconds,
            clock=self.clock,
        )
        self.service.load_cameras()
        return self.service

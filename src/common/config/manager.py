from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigurationError
from .models import MonitorConfig

class ConfigManager:
    """Loads monitor profiles and validates them against MonitorConfig."""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_monitor_config(self, profile: str = "default", overrides: Optional[list] = None) -> DictConfig:
        """
        Loads conf/monitor/<profile>.yaml on top of the structured defaults.

        overrides is an optional OmegaConf dotlist, e.g. ["refresh.delay_seconds=0"].
        """
        config_path = self.config_dir / "monitor" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        raw = OmegaConf.load(config_path)
        return self.build(raw, overrides)

    def build(self, raw: DictConfig, overrides: Optional[list] = None) -> DictConfig:
        """Merges a raw config node with the schema and validates it."""
        schema = OmegaConf.structured(MonitorConfig)
        # A profile that names its categories replaces the default table
        if "categories" in raw:
            schema.categories = {}
        try:
            cfg = OmegaConf.merge(schema, raw)
            if overrides:
                cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid monitor config: {e}") from e

        validate_monitor_config(cfg)
        return cfg


def validate_monitor_config(cfg: DictConfig) -> None:
    """Range checks that the structured schema cannot express."""
    required_keys = ['categories', 'simulation', 'source', 'refresh']
    for key in required_keys:
        if key not in cfg:
            raise ConfigurationError(f"Missing required config key: {key}")

    if len(cfg.categories) == 0:
        raise ConfigurationError("At least one event category must be configured")

    sim = cfg.simulation
    if not 0.0 <= sim.min_fraction <= sim.max_fraction <= 1.0:
        raise ConfigurationError(
            f"Selection fraction bounds must satisfy 0 <= min <= max <= 1, "
            f"got [{sim.min_fraction}, {sim.max_fraction})"
        )
    if not 0.0 <= sim.min_confidence <= sim.max_confidence <= 1.0:
        raise ConfigurationError(
            f"Confidence bounds must satisfy 0 <= min <= max <= 1, "
            f"got [{sim.min_confidence}, {sim.max_confidence})"
        )
    if cfg.refresh.delay_seconds < 0:
        raise ConfigurationError("refresh.delay_seconds must be non-negative")

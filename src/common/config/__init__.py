from .models import MonitorConfig, CategoryConfig, SimulationConfig, default_categories
from .manager import ConfigManager, validate_monitor_config

__all__ = [
    "MonitorConfig",
    "CategoryConfig",
    "SimulationConfig",
    "default_categories",
    "ConfigManager",
    "validate_monitor_config",
]

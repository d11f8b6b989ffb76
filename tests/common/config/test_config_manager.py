import pytest
from pathlib import Path
from omegaconf import OmegaConf
from src.common.config import ConfigManager
from src.common.exceptions import ConfigurationError
from src.monitor.domain.categories import CategoryTable
from src.monitor.infrastructure.sources.camera_source import JsonCameraSource

ROOT = Path(__file__).resolve().parents[3]
CONF_DIR = ROOT / "conf"

@pytest.fixture
def manager():
    return ConfigManager(CONF_DIR)

def test_load_default_profile(manager):
    cfg = manager.load_monitor_config("default")
    assert list(cfg.categories) == ["fire", "dense_traffic", "sparse_traffic", "accident"]
    assert cfg.simulation.min_fraction == 0.2
    assert cfg.simulation.max_fraction == 0.3
    assert cfg.refresh.delay_seconds == 1.0

def test_load_urban_profile_replaces_categories(manager):
    cfg = manager.load_monitor_config("urban")
    table = CategoryTable.from_mapping(cfg.categories)
    assert table.names == ("traffic", "construction", "accident", "flood")
    assert table.get("flood").icon == "🌊"
    # Not set in the profile: falls back to the schema default
    assert cfg.server.port == 8000

def test_missing_profile(manager):
    with pytest.raises(FileNotFoundError):
        manager.load_monitor_config("does_not_exist")

def test_overrides(manager):
    cfg = manager.load_monitor_config("default", overrides=["refresh.delay_seconds=0", "simulation.seed=3"])
    assert cfg.refresh.delay_seconds == 0
    assert cfg.simulation.seed == 3

@pytest.mark.parametrize("raw", [
    {"simulation": {"min_fraction": 0.5, "max_fraction": 0.3}},
    {"simulation": {"max_confidence": 1.5}},
    {"refresh": {"delay_seconds": -1}},
    {"categories": {}},
])
def test_invalid_values(manager, raw):
    with pytest.raises(ConfigurationError):
        manager.build(OmegaConf.create(raw))

def test_type_mismatch(manager):
    with pytest.raises(ConfigurationError):
        manager.build(OmegaConf.create({"refresh": {"delay_seconds": "soon"}}))

@pytest.mark.parametrize("profile, expected", [("default", 12), ("urban", 10)])
def test_bundled_camera_lists(manager, profile, expected):
    cfg = manager.load_monitor_config(profile)
    cameras = JsonCameraSource(ROOT / cfg.source.cameras_path).load()
    assert len(cameras) == expected

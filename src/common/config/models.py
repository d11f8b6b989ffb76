from dataclasses import dataclass, field
from typing import Optional, Dict

@dataclass
class CategoryConfig:
    label: str
    color: str = "#6b7280"
    icon: str = ""

def default_categories() -> Dict[str, CategoryConfig]:
    return {
        "fire": CategoryConfig(label="Fire", color="#ef4444", icon="🔥"),
        "dense_traffic": CategoryConfig(label="Dense Traffic", color="#f97316", icon="🚗"),
        "sparse_traffic": CategoryConfig(label="Sparse Traffic", color="#22c55e", icon="🛣️"),
        "accident": CategoryConfig(label="Accident", color="#a855f7", icon="🚑"),
    }

@dataclass
class SimulationConfig:
    min_fraction: float = 0.20
    max_fraction: float = 0.30
    min_confidence: float = 0.7
    max_confidence: float = 1.0
    seed: Optional[int] = None

@dataclass
class SourceConfig:
    cameras_path: str = "data/cameras.json"

@dataclass
class RefreshConfig:
    delay_seconds: float = 1.0

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class MonitorConfig:
    categories: Dict[str, CategoryConfig] = field(default_factory=default_categories)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

import os
import sys
import hydra
import uvicorn
from hydra.utils import get_original_cwd
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config import ConfigManager
from src.common.logging import setup_logger
from src.monitor.application.builder import MonitorApplicationBuilder
from src.monitor.presentation.api import create_app

logger = setup_logger("monitor.server")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    monitor_cfg = ConfigManager().build(cfg.monitor)
    logger.info("Configuration loaded.")

    builder = MonitorApplicationBuilder(monitor_cfg, base_dir=get_original_cwd())
    service = (
        builder
        .build_categories()
        .build_source()
        .build_simulator()
        .build_broadcaster()
        .build_service()
    )

    app = create_app(service)

    server_cfg = monitor_cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()

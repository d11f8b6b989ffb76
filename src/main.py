import argparse
import asyncio
import json
import sys
import os
from pathlib import Path

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def main():
    """
    Main entry point for the event monitor.
    """
    parser = argparse.ArgumentParser(description="Urban Orchestration - Event Monitor")
    parser.add_argument('module', choices=['serve', 'simulate'], help="Module to run")
    parser.add_argument('--profile', default='default', help="Config profile under conf/monitor/")
    parser.add_argument('--config-dir', default='conf', help="Directory holding the config profiles")

    # Remaining arguments are OmegaConf dotlist overrides, e.g. refresh.delay_seconds=0
    args, unknown = parser.parse_known_args()

    from src.common.config import ConfigManager
    from src.common.logging import setup_logger
    from src.monitor.application.builder import MonitorApplicationBuilder

    logger = setup_logger("monitor.main")
    cfg = ConfigManager(Path(args.config_dir)).load_monitor_config(args.profile, overrides=unknown)

    builder = MonitorApplicationBuilder(cfg)
    service = builder.build_categories().build_source().build_simulator().build_broadcaster().build_service()

    if args.module == 'simulate':
        snapshot = asyncio.run(service.refresh())
        data = service.broadcaster.serialize_snapshot(snapshot, service.categories)
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif args.module == 'serve':
        import uvicorn
        from src.monitor.presentation.api import create_app

        app = create_app(service)
        logger.info(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
        uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)

if __name__ == "__main__":
    main()

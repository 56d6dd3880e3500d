"""Main application entry point.

Bootstraps the configuration, initializes logging from it and hands the API
settings off to the rest of the application.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import Configuration, bootstrap
from .core.errors import ConfigError
from .core.logging_setup import setup_logging


def _print_config(config: Configuration) -> None:
    ls = config.logging_settings
    api, _ = config.take_api_settings()
    print(f"config file: {config.config_path}")
    print(f"[Logging] LOG_OUTPUT = {ls.log_output}")
    print(f"[Logging] LOG_LEVEL = {ls.log_level.name}")
    print(f"[Api] BASE_URL = {api.base_url}")


def main(argv: Optional[List[str]] = None) -> int:
    """Start up: resolve, provision and load the config, then set up logging.

    Returns a process exit code; 1 when the configuration cannot be loaded.
    """
    ap = argparse.ArgumentParser(prog="wiki-tui-config")
    ap.add_argument("--config-dir", type=str, default=None, help="use this dir instead of the user config dir")
    ap.add_argument("--show", action="store_true", help="print the resolved config file and settings")
    ap.add_argument("--console-log", action="store_true", help="also log to stderr")
    args = ap.parse_args(argv)

    try:
        config = bootstrap(config_dir=args.config_dir)
    except ConfigError as e:
        logging.getLogger(__name__).error("startup failed: %s", e)
        print(f"wiki-tui: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging_settings, console=args.console_log)
    logging.getLogger(__name__).info("Configuration loaded from %s", config.config_path)

    if args.show:
        _print_config(config)
        return 0

    api, residual = config.take_api_settings()
    logging.getLogger(__name__).info(
        "API base url %s, logging to %s", api.base_url, residual.logging_settings.log_output
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

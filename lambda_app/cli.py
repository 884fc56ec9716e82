"""
Command-line entry point.

Takes no arguments. Loads configuration, initializes shared state and runs
the demonstration, printing its lines to stdout.
"""

import sys
from pathlib import Path
from typing import Optional

from .capture import shared_state
from .config.loader import ConfigLoader
from .demo import run_demo
from .errors import ConfigurationError
from .logging.config import configure_logging, get_logger

logger = get_logger(__name__)


def main(config_dir: Optional[Path] = None) -> int:
    """Run the demonstration and return the process exit code."""
    try:
        config = ConfigLoader.create(config_dir).load()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Invalid configuration", error=str(e), source=e.source)
        return 1

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
        include_caller=config.logging.include_caller,
    )

    shared_state.reset(config.shared_state)
    lines = run_demo(sys.stdout)
    logger.info("Finished", lines=lines)
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())

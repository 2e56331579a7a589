"""
Psydekick Logging Configuration

Configures logging based on environment variables:
- PSYDEKICK_DEBUG: Enable debug logging (default: false)
- PSYDEKICK_LOG_FILE: Optional log file path (default: stderr only)

Host-facing components log through get_host_logger(), which prefixes every
message with the [Psydekick] tag so lines are recognisable in the editor log.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from psydekick.configs.constants import LOG_TAG


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for Psydekick.

    Args:
        debug: Enable debug level. Defaults to PSYDEKICK_DEBUG env var.
        log_file: Log file path. Defaults to PSYDEKICK_LOG_FILE env var.
                  When unset, everything goes to stderr.

    Returns:
        Root logger for psydekick
    """
    if debug is None:
        debug = os.environ.get("PSYDEKICK_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("PSYDEKICK_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("psydekick")
    logger.setLevel(level)
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "setup", "bridge", "install")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"psydekick.{component}")


class HostLogAdapter(logging.LoggerAdapter):
    """Prefixes messages with LOG_TAG."""

    def process(self, msg, kwargs):
        return f"{LOG_TAG} {msg}", kwargs


def get_host_logger(component: str) -> HostLogAdapter:
    """Get a component logger whose messages carry the [Psydekick] tag."""
    return HostLogAdapter(get_logger(component), {})

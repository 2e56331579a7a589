"""
Psydekick Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from psydekick.configs.logging import get_host_logger, get_logger, setup_logging

# Paths
from psydekick.configs.paths import get_data_root, get_project_root

# Constants
from psydekick.configs.constants import (
    DEFAULT_BRIDGE_HOST,
    DEFAULT_BRIDGE_PORT,
    LOG_TAG,
    MARKER_DIR_NAME,
    MARKER_FILE_NAME,
)

# YAML config
from psydekick.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_bridge_settings,
    get_config_path,
    load_yaml_config,
)

__all__ = [
    # Logging
    "get_host_logger",
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_root",
    "get_project_root",
    # Constants
    "DEFAULT_BRIDGE_HOST",
    "DEFAULT_BRIDGE_PORT",
    "LOG_TAG",
    "MARKER_DIR_NAME",
    "MARKER_FILE_NAME",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "create_default_config",
    "get_bridge_settings",
    "get_config_path",
    "load_yaml_config",
]

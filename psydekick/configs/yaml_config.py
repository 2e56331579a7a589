"""
Psydekick YAML Configuration

Loading and defaults for <project>/psydekick.yaml.
"""

from pathlib import Path

import yaml

from psydekick.configs.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BRIDGE_HOST,
    DEFAULT_BRIDGE_PORT,
)
from psydekick.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = f"""\
# Psydekick Configuration
# Edit this file to customize the Psydekick setup command.

# Local bridge listener
bridge:
  host: "{DEFAULT_BRIDGE_HOST}"
  port: {DEFAULT_BRIDGE_PORT}

# Override the UnityMcpServer source directory (default: platform install location)
# server_path: "/home/you/.local/share/UnityMCP/UnityMcpServer/src"

# Enable debug logging
debug: false
"""


def get_config_path(project_root: Path) -> Path:
    """Get the path to psydekick.yaml for a project."""
    return project_root / CONFIG_FILE_NAME


def load_yaml_config(project_root: Path) -> dict:
    """
    Load configuration from <project>/psydekick.yaml.

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    config_path = get_config_path(project_root)
    if not config_path.exists():
        return {}

    try:
        config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Invalid psydekick.yaml", {"path": str(config_path), "error": str(e)}
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            "psydekick.yaml must contain a mapping", {"path": str(config_path)}
        )
    return config


def get_bridge_settings(config: dict) -> tuple[str, int]:
    """Get (host, port) for the bridge listener, falling back to defaults."""
    bridge = config.get("bridge") or {}
    host = bridge.get("host", DEFAULT_BRIDGE_HOST)
    try:
        port = int(bridge.get("port", DEFAULT_BRIDGE_PORT))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "bridge.port must be an integer", {"port": bridge.get("port")}
        ) from e
    return host, port


def create_default_config(project_root: Path) -> bool:
    """
    Create default psydekick.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists

    Raises:
        ConfigurationError: If the file cannot be written
    """
    config_path = get_config_path(project_root)
    if config_path.exists():
        return False

    try:
        config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            "Could not write psydekick.yaml", {"path": str(config_path), "error": str(e)}
        ) from e
    return True

"""
UnityMcpServer Location

Default Installer: resolves where the companion UnityMcpServer source
directory is installed. The path is never validated here; callers record
it as-is.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from psydekick.configs import get_host_logger
from psydekick.configs.constants import SERVER_DIR_NAME, SERVER_SRC_DIR, SERVER_VENDOR_DIR
from psydekick.setup.orchestrator import Installer

logger = get_host_logger("install.server")


def get_install_root(platform: Optional[str] = None) -> Path:
    """
    Get the per-user directory the server is installed under.

    - Linux: $XDG_DATA_HOME or ~/.local/share
    - macOS: ~/Library/Application Support
    - Windows: %LOCALAPPDATA%/Programs
    """
    platform = platform or sys.platform
    home = Path.home()

    if platform.startswith("win"):
        local_app_data = os.environ.get("LOCALAPPDATA")
        base = Path(local_app_data) if local_app_data else home / "AppData" / "Local"
        return base / "Programs"
    if platform == "darwin":
        return home / "Library" / "Application Support"

    xdg_data = os.environ.get("XDG_DATA_HOME")
    return Path(xdg_data) if xdg_data else home / ".local" / "share"


def get_default_server_path(platform: Optional[str] = None) -> Path:
    """Get the platform default <install root>/UnityMCP/UnityMcpServer/src."""
    return get_install_root(platform) / SERVER_VENDOR_DIR / SERVER_DIR_NAME / SERVER_SRC_DIR


def is_server_installed(server_path: str) -> bool:
    """Check whether the server source directory exists."""
    return bool(server_path) and Path(server_path).is_dir()


class ServerInstaller(Installer):
    """
    Resolves the UnityMcpServer source directory.

    First match wins: explicit override, PSYDEKICK_SERVER_PATH env var,
    server_path from psydekick.yaml, platform default.
    """

    def __init__(self, override: Optional[str] = None, config: Optional[dict] = None):
        self.override = override
        self.config = config or {}

    def resolve_server_path(self) -> str:
        if self.override is not None:
            server_path, source = self.override, "override"
        elif os.environ.get("PSYDEKICK_SERVER_PATH"):
            server_path, source = os.environ["PSYDEKICK_SERVER_PATH"], "environment"
        elif self.config.get("server_path"):
            server_path, source = str(self.config["server_path"]), "config"
        else:
            server_path, source = str(get_default_server_path()), "default"

        logger.debug(f"Resolved server path from {source}: {server_path}")
        if not is_server_installed(server_path):
            logger.warning(f"UnityMcpServer not found at {server_path}")
        return server_path

"""
Server Installation Lookup

Locates the installed UnityMcpServer for the setup command.
"""

from .server import (
    ServerInstaller,
    get_default_server_path,
    get_install_root,
    is_server_installed,
)

__all__ = [
    "ServerInstaller",
    "get_default_server_path",
    "get_install_root",
    "is_server_installed",
]

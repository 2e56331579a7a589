"""
Server Path Marker File

The marker file publishes the resolved UnityMcpServer directory to other
tooling: <data root>/../Unity MCP Bridge/serverpath.txt, whose whole content
is the most recently recorded path.

Directory creation and writes return MarkerWriteResult values instead of
raising, so the caller decides how a failure is reported. OS errors,
unencodable paths and invalid path strings (ValueError) all count as failures.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from psydekick.configs.constants import MARKER_DIR_NAME, MARKER_FILE_NAME


@dataclass
class MarkerWriteResult:
    """Outcome of a marker directory or file operation."""

    path: Path
    ok: bool
    error: Optional[str] = None


def get_marker_dir(data_root: Path) -> Path:
    """Get the marker directory, a sibling of the data root."""
    return data_root.parent / MARKER_DIR_NAME


def get_marker_path(data_root: Path) -> Path:
    """Get the full path of serverpath.txt."""
    return get_marker_dir(data_root) / MARKER_FILE_NAME


def ensure_marker_dir(directory: Path) -> MarkerWriteResult:
    """
    Create the marker directory if it doesn't exist.

    Args:
        directory: Directory to create (parents included)

    Returns:
        MarkerWriteResult; ok is True if the directory exists afterwards
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        return MarkerWriteResult(path=directory, ok=False, error=str(e))
    return MarkerWriteResult(path=directory, ok=True)


def write_marker(path: Path, server_path: str) -> MarkerWriteResult:
    """
    Overwrite the marker file with server_path, verbatim.

    No trailing newline is added and the value is not validated.

    Args:
        path: Marker file path
        server_path: Content to record

    Returns:
        MarkerWriteResult with the write outcome
    """
    try:
        path.write_text(server_path, encoding="utf-8")
    except (OSError, ValueError) as e:
        return MarkerWriteResult(path=path, ok=False, error=str(e))
    return MarkerWriteResult(path=path, ok=True)


def read_marker(data_root: Path) -> Optional[str]:
    """Read the recorded server path, or None if no marker exists."""
    path = get_marker_path(data_root)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")

"""
Project Environment

Default Environment for running outside the editor: exposes the project's
Assets folder as data root and keeps an in-memory index of project files.
"""

import os
from pathlib import Path
from typing import Optional

from psydekick.configs import get_data_root, get_logger
from psydekick.configs.constants import INDEX_IGNORE_DIRS
from psydekick.setup.orchestrator import Environment

logger = get_logger("host")


class ProjectEnvironment(Environment):
    """File index over a Unity project directory."""

    def __init__(self, project_root: Path, ignore_dirs: Optional[set[str]] = None):
        self.project_root = Path(project_root)
        self.ignore_dirs = INDEX_IGNORE_DIRS if ignore_dirs is None else ignore_dirs
        self._index: set[str] = set()

    @property
    def data_root(self) -> Path:
        return get_data_root(self.project_root)

    @property
    def indexed_files(self) -> frozenset[str]:
        return frozenset(self._index)

    def contains(self, rel_path: str) -> bool:
        return Path(rel_path).as_posix() in self._index

    def refresh_index(self) -> None:
        """Rebuild the index from disk, replacing the previous one."""
        index = set()
        for root, dirs, files in os.walk(self.project_root):
            dirs[:] = [d for d in dirs if d not in self.ignore_dirs]
            for name in files:
                rel = Path(root, name).relative_to(self.project_root)
                index.add(rel.as_posix())

        self._index = index
        logger.debug(f"Indexed {len(index)} files under {self.project_root}")

"""
Psydekick Project Paths

Resolves the Unity project root and its data root (the Assets folder).
"""

import os
from pathlib import Path
from typing import Optional

from psydekick.configs.constants import DATA_ROOT_NAME


def get_project_root(project_root: Optional[str] = None) -> Path:
    """Get the Unity project root.

    Order: explicit argument, PSYDEKICK_PROJECT_ROOT env var, current directory.
    """
    if project_root:
        return Path(project_root).expanduser().resolve()
    env_root = os.environ.get("PSYDEKICK_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path.cwd()


def get_data_root(project_root: Path) -> Path:
    """Get the project's primary data root (<project>/Assets)."""
    return project_root / DATA_ROOT_NAME

"""
Host Environment

Default host hooks used when the setup command runs from a terminal.
"""

from .environment import ProjectEnvironment

__all__ = ["ProjectEnvironment"]

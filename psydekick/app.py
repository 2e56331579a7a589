"""
Default Wiring

Builds the command registry with the setup command bound to the default
collaborators for a project directory.
"""

from pathlib import Path
from typing import Optional

from psydekick.bridge import BridgeLifecycle
from psydekick.configs import get_bridge_settings, load_yaml_config
from psydekick.host import ProjectEnvironment
from psydekick.install import ServerInstaller
from psydekick.setup import CommandRegistry, SetupOrchestrator, register_setup_command


def build_orchestrator(
    project_root: Path,
    config: Optional[dict] = None,
    server_path: Optional[str] = None,
) -> SetupOrchestrator:
    """Create a SetupOrchestrator over the default bridge, installer and environment."""
    if config is None:
        config = load_yaml_config(project_root)
    host, port = get_bridge_settings(config)

    return SetupOrchestrator(
        lifecycle=BridgeLifecycle(host=host, port=port),
        installer=ServerInstaller(override=server_path, config=config),
        environment=ProjectEnvironment(project_root),
    )


def build_registry(orchestrator: SetupOrchestrator) -> CommandRegistry:
    """Create the command table with Psydekick/Setup registered."""
    registry = CommandRegistry()
    register_setup_command(registry, orchestrator)
    return registry

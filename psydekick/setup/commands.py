"""
Command Registration Table

Maps stable command identifiers to argument-free handlers, independent of
any particular host SDK. The host (or the terminal entrypoint) dispatches
by identifier.
"""

from dataclasses import dataclass
from typing import Callable

from psydekick.configs import get_logger
from psydekick.exceptions import CommandRegistrationError, UnknownCommandError
from psydekick.setup.orchestrator import SetupOrchestrator

logger = get_logger("commands")

SETUP_COMMAND_ID = "psydekick.setup"
SETUP_COMMAND_LABEL = "Psydekick/Setup"
SETUP_COMMAND_PRIORITY = 1


@dataclass(frozen=True)
class CommandSpec:
    """A registered command. Lower priority sorts first in menus."""

    command_id: str
    label: str
    handler: Callable[[], object]
    priority: int = 100


class CommandRegistry:
    """Registration table for invocable commands."""

    def __init__(self):
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.command_id in self._commands:
            raise CommandRegistrationError(
                "Command already registered", {"command_id": spec.command_id}
            )
        self._commands[spec.command_id] = spec
        logger.debug(f"Registered command {spec.command_id} ({spec.label})")

    def get(self, command_id: str) -> CommandSpec:
        try:
            return self._commands[command_id]
        except KeyError:
            raise UnknownCommandError(
                "Unknown command", {"command_id": command_id}
            ) from None

    def list_commands(self) -> list[CommandSpec]:
        return sorted(self._commands.values(), key=lambda s: (s.priority, s.command_id))

    def dispatch(self, command_id: str) -> None:
        """
        Invoke a command's handler.

        The handler's return value is discarded; its exceptions propagate.
        """
        spec = self.get(command_id)
        logger.debug(f"Dispatching {command_id}")
        spec.handler()

    def __contains__(self, command_id: str) -> bool:
        return command_id in self._commands

    def __len__(self) -> int:
        return len(self._commands)


def register_setup_command(
    registry: CommandRegistry, orchestrator: SetupOrchestrator
) -> CommandSpec:
    """Bind the orchestrator's run under the Psydekick/Setup command."""
    spec = CommandSpec(
        command_id=SETUP_COMMAND_ID,
        label=SETUP_COMMAND_LABEL,
        handler=orchestrator.run,
        priority=SETUP_COMMAND_PRIORITY,
    )
    registry.register(spec)
    return spec

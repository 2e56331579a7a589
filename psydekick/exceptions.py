"""
Psydekick Exception Hierarchy

Centralized exception classes for the setup command and its collaborators.
All Psydekick-specific exceptions inherit from PsydekickError.

Filesystem failures while writing the marker file are reported as
MarkerWriteResult values, not exceptions.

Usage:
    from psydekick.exceptions import BridgeStartError

    try:
        lifecycle.restart()
    except BridgeStartError as e:
        logger.error(f"Bridge failed: {e}")
"""


class PsydekickError(Exception):
    """
    Base exception for all Psydekick errors.

    details holds the context needed to act on the error in the editor log,
    typically the path, host or port involved. It is rendered as key=value
    pairs after the message.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message}: {context}"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PsydekickError):
    """Error in psydekick.yaml or environment configuration."""

    pass


# =============================================================================
# Bridge Errors
# =============================================================================


class BridgeError(PsydekickError):
    """Base class for bridge listener errors."""

    pass


class BridgeStartError(BridgeError):
    """The bridge listener could not bind or start."""

    pass


# =============================================================================
# Command Errors
# =============================================================================


class CommandError(PsydekickError):
    """Base class for command registration and dispatch errors."""

    pass


class UnknownCommandError(CommandError):
    """No command is registered under the requested identifier."""

    pass


class CommandRegistrationError(CommandError):
    """A command identifier is already registered."""

    pass

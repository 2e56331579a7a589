"""
Bridge Lifecycle

Default LifecycleManager: a local TCP listener served from a daemon thread.
Only a liveness probe is answered here ("ping" -> "pong"); the bridge
protocol itself lives elsewhere.
"""

import socket
import socketserver
import threading
from typing import Optional

from psydekick.configs import DEFAULT_BRIDGE_HOST, DEFAULT_BRIDGE_PORT, get_host_logger
from psydekick.configs.constants import BRIDGE_PROBE_TIMEOUT
from psydekick.exceptions import BridgeStartError
from psydekick.setup.orchestrator import LifecycleManager

logger = get_host_logger("bridge")


class _ProbeHandler(socketserver.StreamRequestHandler):
    """Answers one line per request."""

    def handle(self):
        line = self.rfile.readline().strip()
        if line == b"ping":
            self.wfile.write(b"pong\n")
        else:
            self.wfile.write(b"unknown\n")


class _BridgeServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


class BridgeLifecycle(LifecycleManager):
    """
    Starts and stops the local bridge listener.

    restart() always stops first, so repeated setup runs leave exactly one
    listener bound.
    """

    def __init__(self, host: str = DEFAULT_BRIDGE_HOST, port: int = DEFAULT_BRIDGE_PORT):
        self.host = host
        self.port = port
        self._server: Optional[_BridgeServer] = None
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._server is not None

    @property
    def address(self) -> Optional[tuple[str, int]]:
        """Actual bound (host, port), or None when stopped."""
        if self._server is None:
            return None
        host, port = self._server.server_address[:2]
        return host, port

    def start(self) -> None:
        """Bind and serve. No-op if already running."""
        with self._lock:
            if self._server is not None:
                return

            try:
                server = _BridgeServer((self.host, self.port), _ProbeHandler)
            except OSError as e:
                raise BridgeStartError(
                    "Failed to start bridge listener",
                    {"host": self.host, "port": self.port, "error": str(e)},
                ) from e

            self._server = server
            self._thread = threading.Thread(
                target=server.serve_forever,
                name="psydekick-bridge",
                daemon=True,
            )
            self._thread.start()

        host, port = self.address
        logger.info(f"Bridge listening on {host}:{port}")

    def stop(self) -> None:
        """Shut down the listener. No-op if already stopped."""
        with self._lock:
            server, thread = self._server, self._thread
            self._server = None
            self._thread = None

        if server is None:
            return

        server.shutdown()
        server.server_close()
        if thread:
            thread.join(timeout=5)
        logger.info("Bridge stopped")

    def restart(self) -> None:
        self.stop()
        self.start()


def ping_bridge(
    host: str = DEFAULT_BRIDGE_HOST,
    port: int = DEFAULT_BRIDGE_PORT,
    timeout: float = BRIDGE_PROBE_TIMEOUT,
) -> bool:
    """
    Probe a bridge listener.

    Returns:
        True if the listener answered "pong", False otherwise
    """
    try:
        with socket.create_connection((host, port), timeout=timeout) as sock:
            sock.sendall(b"ping\n")
            reply = sock.makefile("rb").readline().strip()
    except OSError as e:
        logger.debug(f"Bridge probe failed on {host}:{port}: {e}")
        return False
    return reply == b"pong"

"""
Bridge Listener

Default lifecycle manager for the local Unity MCP bridge listener.
"""

from .lifecycle import BridgeLifecycle, ping_bridge

__all__ = ["BridgeLifecycle", "ping_bridge"]

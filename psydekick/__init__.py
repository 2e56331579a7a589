"""
Psydekick - editor-side setup for the Unity MCP bridge.

Restarts the local bridge listener, records the installed UnityMcpServer
location in a marker file and refreshes the project file index.
"""

__version__ = "1.0.0"

"""
Psydekick Constants

Static values shared by the setup command, the bridge and the installer.
"""

# Prefix for every host-facing log line
LOG_TAG = "[Psydekick]"

# --- Bridge ---

DEFAULT_BRIDGE_HOST = "127.0.0.1"
DEFAULT_BRIDGE_PORT = 6400
BRIDGE_PROBE_TIMEOUT = 2.0  # seconds

# --- Marker File ---
# Sibling of the project data root; the space is intentional (human-legible)

MARKER_DIR_NAME = "Unity MCP Bridge"
MARKER_FILE_NAME = "serverpath.txt"

# --- Project Layout ---

DATA_ROOT_NAME = "Assets"
CONFIG_FILE_NAME = "psydekick.yaml"

# Directories skipped when rebuilding the project file index
INDEX_IGNORE_DIRS = {
    ".git",
    ".idea",
    ".vs",
    "__pycache__",
    "Library",
    "Logs",
    "obj",
    "Temp",
}

# --- Companion Server ---

SERVER_VENDOR_DIR = "UnityMCP"
SERVER_DIR_NAME = "UnityMcpServer"
SERVER_SRC_DIR = "src"

"""
Psydekick Command Line

Dispatches registered commands from a terminal.

Usage:
    python -m psydekick list
    python -m psydekick run psydekick.setup --project ~/Unity/MyGame
    python -m psydekick run psydekick.setup --keep-alive
    python -m psydekick status --project ~/Unity/MyGame
"""

import argparse
import sys
import threading
from typing import Optional

from psydekick.app import build_orchestrator, build_registry
from psydekick.bridge import ping_bridge
from psydekick.configs import (
    create_default_config,
    get_bridge_settings,
    get_data_root,
    get_host_logger,
    get_project_root,
    load_yaml_config,
    setup_logging,
)
from psydekick.exceptions import PsydekickError
from psydekick.setup import SETUP_COMMAND_ID, read_marker


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psydekick",
        description="Editor setup for the Unity MCP bridge",
    )
    parser.add_argument("--project", help="Unity project root (default: cwd)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    # Same options after the subcommand; SUPPRESS keeps a value given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--project", default=argparse.SUPPRESS, help="Unity project root (default: cwd)")
    common.add_argument("--debug", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", parents=[common], help="List registered commands")

    run = sub.add_parser("run", parents=[common], help="Run a registered command")
    run.add_argument("command_id", nargs="?", default=SETUP_COMMAND_ID)
    run.add_argument("--server-path", help="Override the UnityMcpServer directory")
    run.add_argument(
        "--keep-alive",
        action="store_true",
        help="Keep serving the bridge until interrupted",
    )

    sub.add_parser("status", parents=[common], help="Show the recorded server path and bridge state")
    sub.add_parser("init", parents=[common], help="Write a default psydekick.yaml")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(debug=True if args.debug else None)
    logger = get_host_logger("cli")

    try:
        project_root = get_project_root(args.project)

        if args.command == "init":
            created = create_default_config(project_root)
            print("Created psydekick.yaml" if created else "psydekick.yaml already exists")
            return 0

        config = load_yaml_config(project_root)
        if config.get("debug") and not args.debug:
            setup_logging(debug=True)

        if args.command == "status":
            host, port = get_bridge_settings(config)
            recorded = read_marker(get_data_root(project_root))
            print(f"Server path: {recorded if recorded is not None else '(not recorded)'}")
            state = "running" if ping_bridge(host, port) else "stopped"
            print(f"Bridge {host}:{port}: {state}")
            return 0

        orchestrator = build_orchestrator(
            project_root,
            config=config,
            server_path=getattr(args, "server_path", None),
        )
        registry = build_registry(orchestrator)

        if args.command == "list":
            for spec in registry.list_commands():
                print(f"{spec.command_id}\t{spec.label}")
            return 0

        registry.dispatch(args.command_id)
    except PsydekickError as e:
        logger.error(str(e))
        return 1

    if args.keep_alive:
        print("Bridge running, press Ctrl+C to stop", file=sys.stderr)
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            pass
        finally:
            orchestrator.lifecycle.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

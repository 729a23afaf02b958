"""CLI command handlers for sway-scratch.

Usage:
    sway-scratch show --app-id dropdown --exec "foot --app-id dropdown"
    sway-scratch show --class Spotify --exec spotify --resize "set 80 ppt 80 ppt"
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.config import load_config
from ..core.errors import ScratchError
from ..core.sway_client import SwayClient
from ..models.criteria import Criteria
from ..services.toggle_orchestrator import ToggleOrchestrator
from .dryrun import describe_plan
from .logging_config import setup_logging


console = Console()
err_console = Console(stderr=True)


def print_error_with_remediation(error: str, remediation: Optional[str]) -> None:
    """Print error with remediation steps.

    Format: "Error: <issue>" followed by "Remediation: <steps>"
    """
    err_console.print(f"[red]✗ Error:[/red] {escape(error)}", highlight=False)
    if remediation:
        err_console.print(f"[blue]  Remediation:[/blue] {escape(remediation)}", highlight=False)


async def cmd_show(args: argparse.Namespace) -> int:
    """Toggle the named scratchpad.

    Exit codes:
      0 - Scratchpad toggled, moved back to the scratchpad, or launched
      1 - Launch failed, or sway / the window tree could not be used
    """
    logger = setup_logging(verbose=args.verbose, debug=args.debug)

    criteria = Criteria.from_options(app_id=args.app_id, window_class=args.window_class)
    config = load_config(args.config)

    client = SwayClient()
    orchestrator = ToggleOrchestrator(client, config=config)

    try:
        if args.dry_run:
            plan = await orchestrator.plan(criteria, args.resize)
            result = describe_plan(plan, args.exec_command, config, args.resize)
            if args.json:
                console.print_json(json.dumps(result.to_dict()))
            else:
                console.print(result.format_text(), highlight=False, markup=False, soft_wrap=True)
            return 0

        result = await orchestrator.toggle(criteria, args.exec_command, args.resize)
        result.raise_for_failure()
    finally:
        await client.close()

    logger.info(f"Scratchpad {criteria}: {result.action.value}")
    if args.json:
        console.print_json(json.dumps({
            "criteria": criteria.selector(),
            "action": result.action.value,
            "command": result.batch.to_command(),
            "states": [state.value for state in result.history],
        }))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the show subcommand."""
    parser = argparse.ArgumentParser(
        prog="sway-scratch",
        description="Toggle named scratchpads in sway",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"sway-scratch {__version__}"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.config/sway-scratch/config.json)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # sway-scratch show
    parser_show = subparsers.add_parser(
        "show",
        help="Toggle named scratchpad",
        description="Show the scratchpad if hidden, hide it if showing, launch it if missing"
    )
    criteria_group = parser_show.add_mutually_exclusive_group(required=True)
    criteria_group.add_argument(
        "--app-id",
        dest="app_id",
        help="The Wayland app_id of the application"
    )
    criteria_group.add_argument(
        "--class",
        dest="window_class",
        help="The window_properties.class of the application (Xwayland)"
    )
    parser_show.add_argument(
        "--exec",
        dest="exec_command",
        required=True,
        help="The command to open the scratch initially"
    )
    parser_show.add_argument(
        "--resize",
        default=None,
        help='Resize command to run when the scratch is shown (e.g. "set 90 ppt 90 ppt")'
    )
    parser_show.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the commands that would be sent without sending them"
    )
    parser_show.add_argument(
        "--json",
        action="store_true",
        help="Output JSON"
    )
    parser_show.set_defaults(handler=cmd_show)

    return parser


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        return asyncio.run(args.handler(args))
    except ScratchError as e:
        print_error_with_remediation(e.message, e.suggestion)
        return 1
    except ValueError as e:
        print_error_with_remediation(str(e), None)
        return 1
    except KeyboardInterrupt:
        err_console.print("\nInterrupted")
        return 130


def main() -> None:
    """Console script entry point."""
    sys.exit(cli_main())

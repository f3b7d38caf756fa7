"""CLI entrypoint for skillplant."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillplant import __version__
from skillplant.cli.handlers import handle_agents, handle_check, handle_install, handle_path
from skillplant.constants.branding import CLI_DESCRIPTION
from skillplant.exceptions import ConfigError, SkillplantError


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillplant",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    install = subparsers.add_parser("install", help="Install a skill directory for one or more agents")
    install.add_argument("source", type=Path, help="Skill source directory")
    _add_agent_flag(install, multiple=True)
    install.add_argument("-n", "--name", default=None, help="Install under this name instead of the declared one")
    _add_location_flags(install)
    install.add_argument("--json", action="store_true", help="Print results as JSON lines")

    path = subparsers.add_parser("path", help="Print where a skill would be installed")
    path.add_argument("name", help="Skill name")
    _add_agent_flag(path, multiple=False)
    _add_location_flags(path)

    check = subparsers.add_parser("check", help="Report whether a skill is installed")
    check.add_argument("name", help="Skill name")
    _add_agent_flag(check, multiple=False)
    _add_location_flags(check)

    agents = subparsers.add_parser("agents", help="List known agents and their skill directories")
    agents.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_agent_flag(parser: argparse.ArgumentParser, *, multiple: bool) -> None:
    if multiple:
        parser.add_argument(
            "-a",
            "--agent",
            dest="agents",
            action="append",
            required=True,
            help="Target agent type (repeat flag for multiple agents)",
        )
    else:
        parser.add_argument("-a", "--agent", required=True, help="Target agent type")


def _add_location_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-g",
        "--global",
        dest="global_install",
        action="store_true",
        help="Use the agent's global skills directory instead of the project one",
    )
    parser.add_argument("--cwd", type=Path, default=None, help="Project directory (default: current directory)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "install": handle_install,
        "path": handle_path,
        "check": handle_check,
        "agents": handle_agents,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillplantError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

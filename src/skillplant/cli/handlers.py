"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from skillplant.agents import AgentRegistry
from skillplant.config import load_config
from skillplant.exceptions import PathTraversalError, UnknownAgentError
from skillplant.installer import get_install_path, install_skill_for_agent, is_skill_installed
from skillplant.model import InstallResult, Skill
from skillplant.skills import load_skill


def handle_install(args: argparse.Namespace) -> int:
    """Install the source skill for every requested agent."""
    registry = _load_registry(args)
    skill = load_skill(args.source, name=args.name)
    results = asyncio.run(_install_all(skill, args.agents, args, registry))

    for agent_type, result in results:
        if args.json:
            print(json.dumps({"agent": agent_type, **result.to_dict()}, sort_keys=True))
        elif result.success:
            print(f"{agent_type}: installed to {result.path}")
        else:
            print(f"{agent_type}: failed: {result.error}", file=sys.stderr)

    return 0 if all(result.success for _, result in results) else 1


async def _install_all(
    skill: Skill,
    agent_types: list[str],
    args: argparse.Namespace,
    registry: AgentRegistry,
) -> list[tuple[str, InstallResult]]:
    results: list[tuple[str, InstallResult]] = []
    for agent_type in agent_types:
        result = await install_skill_for_agent(
            skill,
            agent_type,
            global_install=args.global_install,
            cwd=args.cwd,
            registry=registry,
        )
        results.append((agent_type, result))
    return results


def handle_path(args: argparse.Namespace) -> int:
    """Print the install path for a skill name."""
    registry = _load_registry(args)
    try:
        install_path = get_install_path(
            args.name,
            args.agent,
            global_install=args.global_install,
            cwd=args.cwd,
            registry=registry,
        )
    except (PathTraversalError, UnknownAgentError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(install_path)
    return 0


def handle_check(args: argparse.Namespace) -> int:
    """Report whether a skill is installed; exit status mirrors the answer."""
    registry = _load_registry(args)
    installed = asyncio.run(
        is_skill_installed(
            args.name,
            args.agent,
            global_install=args.global_install,
            cwd=args.cwd,
            registry=registry,
        )
    )
    print("installed" if installed else "not installed")
    return 0 if installed else 1


def handle_agents(args: argparse.Namespace) -> int:
    """List registered agents with their project and global skill directories."""
    registry = _load_registry(args)
    for agent in registry:
        print(f"{agent.name}\t{agent.display_name}\t{agent.skills_dir}\t{agent.global_skills_dir}")
    return 0


def _load_registry(args: argparse.Namespace) -> AgentRegistry:
    root = args.cwd if getattr(args, "cwd", None) is not None else Path.cwd()
    return load_config(root, args.config).registry()

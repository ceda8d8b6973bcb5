"""Shared utilities for the create-standard CLI."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

USER_AGENT_ENV = "npm_config_user_agent"


@dataclass(frozen=True)
class PackageManagerInfo:
    """Package manager that launched the CLI, parsed from its user agent."""

    name: str
    version: Optional[str] = None


def pkg_from_user_agent(user_agent: Optional[str]) -> Optional[PackageManagerInfo]:
    """Parse ``npm_config_user_agent`` (e.g. ``pnpm/8.6.0 npm/? node/v18.16.0``)."""
    if not user_agent:
        return None
    name, _, version = user_agent.split(" ")[0].partition("/")
    return PackageManagerInfo(name=name, version=version or None)


def detect_package_manager() -> Optional[PackageManagerInfo]:
    return pkg_from_user_agent(os.environ.get(USER_AGENT_ENV))


def install_commands(pkg_manager: str) -> List[str]:
    """Install and dev-server commands for a package manager."""
    if pkg_manager == "yarn":
        return ["yarn", "yarn dev"]
    if pkg_manager == "pnpm":
        return ["pnpm i", "pnpm dev"]
    return [f"{pkg_manager} install", f"{pkg_manager} run dev"]


def print_next_steps(
    console: Console,
    root: Path,
    cwd: Path,
    pkg_info: Optional[PackageManagerInfo] = None,
) -> None:
    """Print what to run after scaffolding.

    Args:
        console: Rich console for output
        root: Scaffolded project root
        cwd: Directory the CLI was started from
        pkg_info: Package manager detected from the user agent (npm if None)
    """
    pkg_manager = pkg_info.name if pkg_info else "npm"

    print_success(console, "Done. Now run:\n")
    if root != cwd:
        console.print(f"  cd {os.path.relpath(root, cwd)}")
    for command in install_commands(pkg_manager):
        console.print(f"  {command}")

    console.print("\nThen to use husky, please run:")
    console.print("  npm run prepare")


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {message}")

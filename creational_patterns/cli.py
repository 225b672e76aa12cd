"""CLI interface for the creational pattern demos."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from creational_patterns.config import AppConfig, load_config
from creational_patterns.demos import all_demo_infos
from creational_patterns.runner import DemoRunner

console = Console()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    args.func(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creational-patterns",
        description="Runnable demos of the creational design patterns",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (default: config.yaml)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # run
    run_parser = subparsers.add_parser("run", help="Run the pattern demos")
    run_parser.add_argument(
        "--demos",
        type=str,
        default=None,
        help="Comma-separated demo names to run, in order (e.g., singleton,builder)",
    )
    run_parser.set_defaults(func=_cmd_run)

    # list
    list_parser = subparsers.add_parser("list", help="List available demos")
    list_parser.set_defaults(func=_cmd_list)

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate the config file")
    validate_parser.set_defaults(func=_cmd_validate)

    return parser


def _load_app_config(args: argparse.Namespace) -> AppConfig:
    """Load config, applying CLI overrides.  Exits on config errors."""
    demos = None
    if getattr(args, "demos", None):
        demos = [d.strip() for d in args.demos.split(",") if d.strip()]
    try:
        return load_config(args.config, demos=demos)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(1)


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _cmd_run(args: argparse.Namespace) -> None:
    config = _load_app_config(args)
    DemoRunner(config, out=console).run()


def _cmd_list(args: argparse.Namespace) -> None:
    config = _load_app_config(args)
    selected = set(config.selected_demos)

    table = Table(title="Creational Pattern Demos")
    table.add_column("Name", style="cyan")
    table.add_column("Pattern")
    table.add_column("Summary")
    table.add_column("Enabled", justify="center")
    for info in all_demo_infos():
        enabled = "[green]yes[/green]" if info.name in selected else "[dim]no[/dim]"
        table.add_row(info.name, info.title, info.summary, enabled)
    console.print(table)


def _cmd_validate(args: argparse.Namespace) -> None:
    config = _load_app_config(args)
    console.print(
        f"[green]OK[/green] {len(config.selected_demos)} demo(s) enabled: "
        f"{', '.join(config.selected_demos)}"
    )


if __name__ == "__main__":
    main()

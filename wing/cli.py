"""Command-line front door for wing.

Parses options, merges them with the persisted config, and runs the
interactive dashboard against a git working tree.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .controller.explorer import ExplorerController
from .controller.state import ExplorerState
from .errors import StartupError
from .git.gateway import GitGateway, StatusGateway
from .runtime.config import AppConfig, resolve_app_config, save_tree_view
from .runtime.dispatcher import CommandDispatcher
from .runtime.logs import DEFAULT_LOG_LEVEL, configure_logging, parse_log_level
from .runtime.loop import run_main_loop
from .runtime.terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _non_negative_float(value: str) -> float:
    """argparse type for refresh periods; 0 disables the timer."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _log_level(value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value.upper()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wing",
        description="Browse, diff, commit, and push a git working tree from the terminal.",
    )
    parser.add_argument("--repo", default=None, help="Repository path. Defaults to the current directory.")
    parser.add_argument(
        "--refresh",
        type=_non_negative_float,
        default=None,
        help="Seconds between automatic refreshes; 0 disables them (default: 2).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style for file and diff highlighting.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=DEFAULT_LOG_LEVEL,
        help="Log level for the log file (default: WARNING).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs here instead of the user log dir.")
    parser.add_argument("--version", action="version", version=f"wing {__version__}")
    return parser


def build_state(config: AppConfig) -> ExplorerState:
    return ExplorerState(
        repo_path=config.repo_path,
        refresh_seconds=config.refresh_seconds,
        tree_view=config.tree_view,
        style=config.style,
        colorize=not config.no_color,
    )


def run_dashboard(config: AppConfig, gateway: StatusGateway | None = None) -> None:
    """Set up terminal, controller, and dispatcher, then run until quit."""
    if not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        raise StartupError("wing needs an interactive terminal")
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    state = build_state(config)
    controller = ExplorerController(state, on_tree_view_changed=save_tree_view)
    dispatcher = CommandDispatcher(gateway or GitGateway(), config.repo_path)
    try:
        run_main_loop(controller, dispatcher, terminal, resolve_theme(config.theme, no_color=config.no_color))
    finally:
        dispatcher.shutdown()


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and launch the dashboard.

    Exits with status 1 (message on stderr) when the repository path is
    missing or the terminal cannot be initialized.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    repo_path = Path(args.repo) if args.repo else Path.cwd()
    if not repo_path.is_dir():
        raise SystemExit(f"Repository path not found: {repo_path}")

    config = resolve_app_config(
        repo_path.resolve(),
        refresh_seconds=args.refresh,
        theme=args.theme,
        style=args.style,
        no_color=args.no_color,
    )
    logger.info("starting wing %s in %s", __version__, config.repo_path)
    try:
        run_dashboard(config)
    except StartupError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(f"wing: {exc}") from exc


if __name__ == "__main__":
    main()

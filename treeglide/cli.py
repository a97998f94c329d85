"""Command-line front door for the treeglide demo.

Loads a JSON tree (or the bundled demo thread), resolves theme and layout
options from flags and config, then either prints one frame or runs the
interactive viewer.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .errors import EmptyTreeError, TreeFormatError
from .runtime import config, run_viewer
from .tree_model import Node, demo_thread_tree, load_tree_file
from .tree_pane import TreeViewport
from .tree_pane.flatten import DEFAULT_LABEL_WIDTH
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger("treeglide")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a labeled tree in the terminal with a single navigable cursor."
    )
    parser.add_argument("path", nargs="?", default=None, help="JSON tree file. Defaults to a demo comment thread.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--no-help", action="store_true", help="Hide the key help line.")
    parser.add_argument("--label-width", type=_positive_int, default=None, help="Label column width.")
    parser.add_argument("--render", action="store_true", help="Print one frame and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width for --render.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Frame height for --render.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def _configure_logging(log_file: str | None) -> None:
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _load_root(path: str | None) -> Node:
    if path is None:
        return demo_thread_tree()
    tree_path = Path(path)
    if not tree_path.is_file():
        raise SystemExit(f"Path not found: {tree_path}")
    try:
        return load_tree_file(tree_path)
    except TreeFormatError as exc:
        raise SystemExit(f"Invalid tree file: {exc}") from exc


def main() -> None:
    """Parse CLI arguments and show the tree."""
    args = _build_parser().parse_args()
    _configure_logging(args.log_file)

    root = _load_root(args.path)
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    show_help = config.load_show_help() and not args.no_help
    label_width = args.label_width or config.load_label_width() or DEFAULT_LABEL_WIDTH

    term = shutil.get_terminal_size((80, 24))
    width = args.width or term.columns
    height = args.height or term.lines
    try:
        viewport = TreeViewport(
            root,
            width,
            height,
            label_width=label_width,
            show_help=show_help,
            theme=theme,
        )
    except EmptyTreeError as exc:
        raise SystemExit(f"Nothing to show: {exc}") from exc

    logger.info("starting with theme %s at %dx%d", theme.name, width, height)
    if args.render or not sys.stdout.isatty():
        sys.stdout.write(viewport.view() + "\n")
        return
    run_viewer(viewport)
    logger.info("viewer closed")


if __name__ == "__main__":
    main()

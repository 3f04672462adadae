import argparse
import logging
import sys
from typing import Any, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .errors import CircleTreeError
from .loader import load_tree, parse_tree, sample_tree, tree_from_level_order
from .tree_components import LayoutConfig, TreeNode, TreeRenderer

_NULL_TOKENS = {"", "null", "none"}


def _parse_level_order(text: str) -> List[Optional[Any]]:
    values: List[Optional[Any]] = []
    for item in text.split(","):
        token = item.strip()
        values.append(None if token.lower() in _NULL_TOKENS else token)
    return values


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="circletree",
        description="Render a binary tree as ASCII circles joined by slanted connectors",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="JSON tree document ('-' for stdin); renders the sample tree when omitted",
    )
    parser.add_argument(
        "--level-order",
        metavar="VALUES",
        help="Comma-separated level-order values, 'null' or an empty item marks a gap",
    )
    parser.add_argument("--horizontal-gap", type=int, default=3, help="Columns between neighbouring nodes")
    parser.add_argument("--depth-gap", type=int, default=6, help="Rows between successive depths")
    parser.add_argument("--connector-style", help="Rich style for connector lines, e.g. 'cyan'")
    parser.add_argument("--node-style", help="Rich style for node circles, e.g. 'bold magenta'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.file and args.level_order:
        parser.error("FILE and --level-order are mutually exclusive")
    return args


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve_tree(args: argparse.Namespace) -> Optional[TreeNode]:
    if args.level_order is not None:
        return tree_from_level_order(_parse_level_order(args.level_order))
    if args.file == "-":
        return parse_tree(sys.stdin.read(), source="<stdin>")
    if args.file:
        return load_tree(args.file)
    return sample_tree()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.verbose)

    console = Console()
    styled = bool(args.connector_style or args.node_style)
    try:
        config = LayoutConfig(horizontal_gap=args.horizontal_gap, depth_gap=args.depth_gap)
        renderer = TreeRenderer(
            config,
            connector_style=args.connector_style,
            node_style=args.node_style,
        )
        root = _resolve_tree(args)
    except CircleTreeError as exc:
        Console(stderr=True).print(f"error: {exc}", markup=False, highlight=False)
        return 2

    text = renderer.render(root, include_markup=styled)
    if styled:
        console.print(text, end="", highlight=False, emoji=False, soft_wrap=True)
    else:
        console.out(text, end="", highlight=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

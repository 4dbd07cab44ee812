"""Main CLI entry point for markdown2json."""

import argparse
import logging
import sys
from typing import List, Optional

from ..exceptions import ConfigError
from ..markdown_processor.output_formatter import CODE_BLOCK_SHAPES
from ..utils.logging_config import setup_logging
from .commands.index import index_command
from .config import Config

logger = logging.getLogger(__name__)

DEPTH_FLAGS = ("-d", "--depth")


def non_negative_int(value: str) -> int:
    """argparse type for the traversal depth."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid depth value: {value}")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"Invalid depth value: {value}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown2json",
        description="Index markdown files into header-delimited sections and print them as JSON",
        epilog="Each input can be a markdown file or a folder. The optional --depth/-d flag must come after all inputs.",
    )
    parser.add_argument("inputs", nargs="+", metavar="input", help="Markdown file or directory to index")
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        default=None,
        help="Maximum directory traversal depth (default: unbounded)",
    )
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("--workers", type=int, default=None, help="Number of files indexed in parallel (default: 1)")
    parser.add_argument(
        "--collect-errors",
        action="store_true",
        help="Attempt every input and file and report all read failures together instead of stopping at the first",
    )
    parser.add_argument("--strip-frontmatter", action="store_true", help="Drop YAML frontmatter before indexing")
    parser.add_argument(
        "--code-blocks",
        choices=CODE_BLOCK_SHAPES,
        default=None,
        help="Emit code blocks as plain strings or as objects with language and meta (default: string)",
    )
    parser.add_argument("--compact", action="store_true", help="Print compact JSON instead of indented JSON")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show progress on stderr (-vv for per-file details)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, rejecting a depth flag placed before inputs."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")

    for position, token in enumerate(argv):
        if token in DEPTH_FLAGS:
            trailing = argv[position + 2 :]
        elif token.startswith("--depth=") or (token.startswith("-d") and token[2:].isdigit()):
            trailing = argv[position + 1 :]
        else:
            continue
        for later in trailing:
            if not later.startswith("-") and later in args.inputs:
                parser.error(f"Unknown flag or flag placed before inputs: {token}")

    return args


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = parse_args(argv)

    setup_logging(verbosity=args.verbose)

    try:
        config = Config(args.config)
    except ConfigError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    index_command(
        config=config,
        inputs=args.inputs,
        max_depth=args.depth,
        workers=args.workers,
        collect_errors=args.collect_errors,
        strip_frontmatter=args.strip_frontmatter,
        code_block_shape=args.code_blocks,
        compact=args.compact,
    )


if __name__ == "__main__":
    main()

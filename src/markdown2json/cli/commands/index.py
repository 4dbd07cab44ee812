"""Index command - sections markdown inputs and prints them as JSON."""

import logging
import sys
from typing import List, Optional

from ...exceptions import Markdown2JsonError
from ...markdown_processor.aggregator import ErrorPolicy
from ...markdown_processor.output_formatter import render_json
from ...markdown_processor.processor import MarkdownProcessor
from ...markdown_processor.scanner import ScannerConfig, find_missing_paths
from ..config import Config

logger = logging.getLogger(__name__)


def index_command(
    config: Config,
    inputs: List[str],
    max_depth: Optional[int] = None,
    workers: int = None,
    collect_errors: bool = False,
    strip_frontmatter: bool = False,
    code_block_shape: str = None,
    compact: bool = False,
):
    """Index markdown files and directories and write the JSON array to stdout."""
    missing = find_missing_paths(inputs)
    if missing:
        logger.error("The following input paths do not exist:")
        for path in missing:
            logger.error(f"  - {path}")
        sys.exit(1)

    depth = max_depth if max_depth is not None else config.max_depth
    error_policy = ErrorPolicy.COLLECT if collect_errors else config.error_policy

    logger.info(f"🔄 Indexing {len(inputs)} input(s), depth: {'unbounded' if depth is None else depth}")

    processor = MarkdownProcessor(
        max_workers=workers or config.index_workers,
        error_policy=error_policy,
        strip_frontmatter=strip_frontmatter or config.strip_frontmatter,
        scanner_config=ScannerConfig(
            skip_hidden_files=config.skip_hidden_files,
            supported_extensions=config.markdown_file_extensions,
        ),
    )

    try:
        index = processor.process_paths(inputs, max_depth=depth)
    except Markdown2JsonError as e:
        logger.error(f"❌ Indexing failed: {e}")
        sys.exit(1)

    stats = processor.get_processing_stats(index)
    logger.info(
        f"✅ Indexed {stats['total_sections']} sections from {stats['total_files']} files "
        f"({stats['total_text_blocks']} text blocks, {stats['total_code_blocks']} code blocks)"
    )

    output = render_json(
        index,
        code_block_shape=code_block_shape or config.code_block_shape,
        indent=None if compact else config.json_indent,
    )
    sys.stdout.write(output + "\n")

"""Main orchestration for the markdown processor component."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import AggregationError, ReadError
from .aggregator import Aggregator, ErrorPolicy
from .indexer import FileIndexer
from .models import FileSectionRecord
from .parser import MarkdownParser
from .scanner import DirectoryScanner, ScannerConfig
from .section_builder import SectionBuilder

logger = logging.getLogger(__name__)


class MarkdownProcessor:
    """Discovers markdown files under inputs and indexes them into sections."""

    def __init__(
        self,
        max_workers: int = 1,
        error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST,
        strip_frontmatter: bool = False,
        scanner_config: ScannerConfig = None,
    ):
        """
        Initialize the markdown processor.

        Args:
            max_workers: Files indexed concurrently (1 = sequential)
            error_policy: How unreadable files are reported
            strip_frontmatter: Drop YAML frontmatter before sectioning
            scanner_config: Extension and hidden-file settings for discovery
        """
        self.scanner = DirectoryScanner(scanner_config)
        self.parser = MarkdownParser(strip_frontmatter=strip_frontmatter)
        self.section_builder = SectionBuilder()
        self.indexer = FileIndexer(builder=self.section_builder, parser=self.parser)
        self.aggregator = Aggregator(self.indexer, max_workers=max_workers, error_policy=error_policy)

    def process_paths(self, inputs: Iterable[str], max_depth: Optional[int] = None) -> List[FileSectionRecord]:
        """
        Main entry point - discover files under every input and index them.

        Args:
            inputs: Markdown files or directories, in the order to index them
            max_depth: Traversal depth limit, None for unbounded

        Returns:
            Index of file sections in input order, then document order
        """
        inputs = list(inputs)
        logger.info(f"Scanning {len(inputs)} input path(s) for markdown files")

        # Under the collect policy discovery failures are reported with read failures
        discovery_failures: Optional[List[ReadError]] = None
        if self.aggregator.error_policy is ErrorPolicy.COLLECT:
            discovery_failures = []

        markdown_files = list(self.scanner.scan_inputs(inputs, max_depth, discovery_failures))
        logger.info(f"Found {len(markdown_files)} markdown files to process")

        try:
            index = self.aggregator.aggregate_paths(markdown_files)
        except AggregationError as e:
            raise AggregationError((discovery_failures or []) + e.failures) from e

        if discovery_failures:
            raise AggregationError(discovery_failures)
        return index

    def process_file(self, file_path: str) -> List[FileSectionRecord]:
        """Index a single markdown file."""
        return self.indexer.index_file(file_path)

    def process_content(self, content: str, file_path: str = "content.md") -> List[FileSectionRecord]:
        """
        Process markdown content directly (without file I/O).

        Args:
            content: Markdown content to process
            file_path: Path to attribute the sections to

        Returns:
            Records generated from content
        """
        if self.parser.strip_frontmatter:
            content = self.parser.parse_content(content, source=file_path).content
        return self.indexer.index_document(file_path, content)

    def get_processing_stats(self, index: List[FileSectionRecord]) -> Dict[str, Any]:
        """
        Get statistics about an index.

        Args:
            index: Records produced by one of the process methods

        Returns:
            Dictionary with processing statistics
        """
        if not index:
            return {
                "total_sections": 0,
                "total_files": 0,
                "total_text_blocks": 0,
                "total_code_blocks": 0,
                "sections_by_level": {},
            }

        files = set()
        sections_by_level: Dict[int, int] = {}
        text_blocks = 0
        code_blocks = 0

        for record in index:
            files.add(record.file_path)
            sections_by_level[record.level] = sections_by_level.get(record.level, 0) + 1
            text_blocks += len(record.body_text)
            code_blocks += len(record.code_blocks)

        return {
            "total_sections": len(index),
            "total_files": len(files),
            "total_text_blocks": text_blocks,
            "total_code_blocks": code_blocks,
            "sections_by_level": dict(sorted(sections_by_level.items())),
        }

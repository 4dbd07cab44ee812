"""Markdown processor for converting markdown documents into indexed sections."""

from .aggregator import Aggregator, ErrorPolicy
from .events import Content, FenceContent, FenceEnd, FenceMarker, FenceStart, Heading, OpenFence
from .indexer import FileIndexer
from .line_scanner import LineScanner
from .models import PREAMBLE_LEVEL, CodeBlock, FileSectionRecord, Section
from .output_formatter import render_json, to_document_elements
from .parser import MarkdownParser, ParseResult
from .processor import MarkdownProcessor
from .scanner import DirectoryScanner, ScannerConfig, find_missing_paths
from .section_builder import SectionBuilder, index_markdown

__all__ = [
    "Aggregator",
    "CodeBlock",
    "Content",
    "DirectoryScanner",
    "ErrorPolicy",
    "FenceContent",
    "FenceEnd",
    "FenceMarker",
    "FenceStart",
    "FileIndexer",
    "FileSectionRecord",
    "Heading",
    "LineScanner",
    "MarkdownParser",
    "MarkdownProcessor",
    "OpenFence",
    "PREAMBLE_LEVEL",
    "ParseResult",
    "ScannerConfig",
    "Section",
    "SectionBuilder",
    "find_missing_paths",
    "index_markdown",
    "render_json",
    "to_document_elements",
]

"""Convert markdown documents into a flat index of header-delimited sections."""

from .exceptions import AggregationError, ConfigError, Markdown2JsonError, ReadError
from .markdown_processor import (
    CodeBlock,
    FileSectionRecord,
    MarkdownProcessor,
    Section,
    index_markdown,
)

__version__ = "0.1.0"

__all__ = [
    "AggregationError",
    "CodeBlock",
    "ConfigError",
    "FileSectionRecord",
    "Markdown2JsonError",
    "MarkdownProcessor",
    "ReadError",
    "Section",
    "index_markdown",
]

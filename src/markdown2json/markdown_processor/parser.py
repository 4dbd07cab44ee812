"""Markdown file reader with optional YAML frontmatter handling."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import frontmatter

from ..exceptions import ReadError

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Frontmatter and body of a markdown document."""

    content: str
    frontmatter: Dict[str, Any] = field(default_factory=dict)
    has_frontmatter: bool = False


class MarkdownParser:
    """Reads markdown files, optionally stripping YAML frontmatter."""

    def __init__(self, strip_frontmatter: bool = False, encoding: str = "utf-8"):
        self.strip_frontmatter = strip_frontmatter
        self.encoding = encoding

    def read_file(self, file_path: Union[str, Path]) -> str:
        """
        Read the markdown text of a file.

        Args:
            file_path: Path to the markdown file (.md, .markdown)

        Returns:
            Document text, without frontmatter when stripping is enabled

        Raises:
            ReadError: If the file cannot be opened or decoded
        """
        try:
            with open(file_path, "r", encoding=self.encoding) as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ReadError(str(file_path), f"Unable to read file as {self.encoding}: {e}") from e
        except OSError as e:
            raise ReadError(str(file_path), e.strerror or str(e)) from e

        if self.strip_frontmatter:
            return self.parse_content(text, source=str(file_path)).content
        return text

    def parse_content(self, content_text: str, source: str = "<string>") -> ParseResult:
        """
        Split markdown text into frontmatter and body.

        Malformed frontmatter is not an error: the whole text is returned as
        the body and a warning is logged.
        """
        try:
            post = frontmatter.loads(content_text)
        except Exception as e:
            logger.warning(f"Ignoring invalid YAML frontmatter in {source}: {e}")
            return ParseResult(content=content_text)

        metadata = post.metadata if post.metadata else {}
        return ParseResult(
            content=post.content if post.content else "",
            frontmatter=metadata,
            has_frontmatter=bool(metadata),
        )

"""Heading/fence scanner that classifies markdown lines into events."""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .events import (
    Content,
    FenceContent,
    FenceEnd,
    FenceMarker,
    FenceStart,
    Heading,
    LineEvent,
    OpenFence,
)

logger = logging.getLogger(__name__)


class LineScanner:
    """Lexes markdown text into heading, fence and content events."""

    def __init__(self):
        # Markdown headers (1-6 levels) indented by at most three spaces;
        # seven or more '#' never match
        self.header_pattern = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+)$")
        # Optional closing sequence, e.g. "## Title ##"
        self.closing_hashes_pattern = re.compile(r"\s+#+$")
        self.fence_open_pattern = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")
        self.fence_close_pattern = re.compile(r"^\s*(`{3,}|~{3,})\s*$")

    def scan(self, content: str) -> Iterator[LineEvent]:
        """
        Classify every line of a markdown document, in order.

        Args:
            content: Full text of one markdown document

        Yields:
            LineEvent objects; an unterminated fence is closed with an
            implicit FenceEnd after the last line
        """
        fence: Optional[OpenFence] = None

        for line in self.split_lines(content):
            if fence is None:
                opened = self._match_fence_open(line)
                if opened is not None:
                    fence, start = opened
                    yield start
                    continue

                heading = self._match_heading(line)
                if heading is not None:
                    yield heading
                else:
                    yield Content(line)
                continue

            if self._closes_fence(line, fence):
                fence = None
                yield FenceEnd()
            else:
                yield FenceContent(line)

        if fence is not None:
            logger.debug("Input ended inside an open code fence, closing it implicitly")
            yield FenceEnd(implicit=True)

    @staticmethod
    def split_lines(content: str) -> List[str]:
        """Split text into lines, normalizing line endings.

        A trailing newline terminates the last line rather than starting an
        empty one.
        """
        lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def _match_fence_open(self, line: str) -> Optional[Tuple[OpenFence, FenceStart]]:
        match = self.fence_open_pattern.match(line)
        if not match:
            return None

        run, info = match.group(1), match.group(2).strip()
        marker = FenceMarker(run[0])
        # A backtick info-string cannot contain backticks ("```inline```" is prose)
        if marker is FenceMarker.BACKTICK and "`" in info:
            return None

        language, meta = self._split_info_string(info)
        return OpenFence(marker=marker, length=len(run)), FenceStart(language, meta)

    def _closes_fence(self, line: str, fence: OpenFence) -> bool:
        match = self.fence_close_pattern.match(line)
        if not match:
            return False
        run = match.group(1)
        return fence.is_closed_by(FenceMarker(run[0]), len(run))

    def _match_heading(self, line: str) -> Optional[Heading]:
        match = self.header_pattern.match(line.rstrip())
        if not match:
            return None

        level = len(match.group(1))
        title = match.group(2).strip()
        without_closing = self.closing_hashes_pattern.sub("", title).strip()
        if without_closing:
            title = without_closing
        return Heading(level=level, title=title)

    @staticmethod
    def _split_info_string(info: str) -> Tuple[Optional[str], Optional[str]]:
        """Split an info-string into (language, meta); empty parts become None."""
        if not info:
            return None, None
        parts = info.split(None, 1)
        language = parts[0]
        meta = parts[1].strip() if len(parts) > 1 else None
        return language, meta or None

"""Section builder that folds scanner events into flat section records."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .events import Content, FenceContent, FenceEnd, FenceStart, Heading, LineEvent
from .line_scanner import LineScanner
from .models import PREAMBLE_LEVEL, CodeBlock, Section

logger = logging.getLogger(__name__)


@dataclass
class _FenceBuffer:
    language: Optional[str]
    meta: Optional[str]
    lines: List[str] = field(default_factory=list)

    def to_code_block(self) -> CodeBlock:
        return CodeBlock(value="\n".join(self.lines), language=self.language, meta=self.meta)


@dataclass
class _SectionDraft:
    """The currently open section and its in-progress accumulators."""

    title: str
    level: int
    body_text: List[str] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    pending_text: List[str] = field(default_factory=list)
    fence: Optional[_FenceBuffer] = None

    def flush_text(self):
        block = "\n".join(self.pending_text).strip()
        if block:
            self.body_text.append(block)
        self.pending_text = []

    def has_content(self) -> bool:
        return bool(self.body_text or self.code_blocks)

    def close(self) -> Section:
        self.flush_text()
        return Section(
            title=self.title,
            level=self.level,
            body_text=list(self.body_text),
            code_blocks=list(self.code_blocks),
        )


class SectionBuilder:
    """Builds the ordered Section sequence of one markdown document."""

    def __init__(self, scanner: LineScanner = None):
        self.scanner = scanner or LineScanner()

    def build_sections(self, content: str) -> List[Section]:
        """
        Scan and section a markdown document.

        Args:
            content: Full markdown text

        Returns:
            Sections in document order; an empty string yields no sections,
            any other document at least one
        """
        if not content:
            return []
        sections = self.build(self.scanner.scan(content))
        # A bare line break still counts as a (blank) document
        return sections or [Section(title="", level=PREAMBLE_LEVEL)]

    def build(self, events: Iterable[LineEvent]) -> List[Section]:
        """
        Fold a scanner event stream into finalized sections.

        Content before the first heading lands in a preamble section with an
        empty title and level 0. The preamble is kept when it holds any text
        or code, or when the document has no heading at all.
        """
        sections: List[Section] = []
        current = _SectionDraft(title="", level=PREAMBLE_LEVEL)
        saw_event = False
        saw_heading = False

        for event in events:
            saw_event = True

            if isinstance(event, Heading):
                self._push(sections, current, keep_empty_preamble=False)
                current = _SectionDraft(title=event.title, level=event.level)
                saw_heading = True

            elif isinstance(event, Content):
                if event.is_blank:
                    if current.pending_text:
                        current.flush_text()
                else:
                    current.pending_text.append(event.line)

            elif isinstance(event, FenceStart):
                current.flush_text()
                current.fence = _FenceBuffer(language=event.language, meta=event.meta)

            elif isinstance(event, FenceContent):
                current.fence.lines.append(event.line)

            elif isinstance(event, FenceEnd):
                current.code_blocks.append(current.fence.to_code_block())
                current.fence = None

        if saw_event:
            self._push(sections, current, keep_empty_preamble=not saw_heading)

        logger.debug(f"Built {len(sections)} sections")
        return sections

    @staticmethod
    def _push(sections: List[Section], draft: _SectionDraft, keep_empty_preamble: bool):
        draft.flush_text()
        if draft.level == PREAMBLE_LEVEL and not draft.has_content() and not keep_empty_preamble:
            return
        sections.append(draft.close())


def index_markdown(content: str) -> List[Section]:
    """Parse a markdown document into flat sections, each starting at a heading."""
    return SectionBuilder().build_sections(content)

"""Data model for indexed markdown sections."""

from dataclasses import dataclass, field
from typing import List, Optional

# Level given to the implicit section holding content before the first heading
PREAMBLE_LEVEL = 0


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block with its info-string split into language and meta."""

    value: str
    language: Optional[str] = None
    meta: Optional[str] = None


@dataclass(frozen=True)
class Section:
    """A heading-delimited unit of a markdown document."""

    title: str
    level: int  # 1-6, or PREAMBLE_LEVEL for content before the first heading
    body_text: List[str] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)

    @property
    def is_preamble(self) -> bool:
        return self.level == PREAMBLE_LEVEL


@dataclass(frozen=True)
class FileSectionRecord:
    """A section stamped with the path of the file it came from."""

    file_path: str
    section: Section

    @property
    def title(self) -> str:
        return self.section.title

    @property
    def level(self) -> int:
        return self.section.level

    @property
    def body_text(self) -> List[str]:
        return self.section.body_text

    @property
    def code_blocks(self) -> List[CodeBlock]:
        return self.section.code_blocks

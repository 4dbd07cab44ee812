"""Line-level events produced by the heading/fence scanner."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class FenceMarker(Enum):
    """Character used to open a fenced code block."""

    BACKTICK = "`"
    TILDE = "~"


@dataclass(frozen=True)
class OpenFence:
    """Scanner state while inside a fence: which marker and how long a run opened it."""

    marker: FenceMarker
    length: int

    def is_closed_by(self, marker: FenceMarker, length: int) -> bool:
        return marker is self.marker and length >= self.length


@dataclass(frozen=True)
class Heading:
    level: int
    title: str


@dataclass(frozen=True)
class FenceStart:
    language: Optional[str] = None
    meta: Optional[str] = None


@dataclass(frozen=True)
class FenceContent:
    line: str


@dataclass(frozen=True)
class FenceEnd:
    implicit: bool = False  # True when end of input closed the fence


@dataclass(frozen=True)
class Content:
    line: str

    @property
    def is_blank(self) -> bool:
        return not self.line.strip()


LineEvent = Union[Heading, FenceStart, FenceContent, FenceEnd, Content]

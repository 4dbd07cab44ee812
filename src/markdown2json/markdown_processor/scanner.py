"""Depth-bounded directory scanner for Markdown files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

from ..exceptions import ReadError

logger = logging.getLogger(__name__)


@dataclass
class ScannerConfig:
    """Configuration for the directory scanner."""

    skip_hidden_files: bool = True
    supported_extensions: List[str] = None

    def __post_init__(self):
        if self.supported_extensions is None:
            self.supported_extensions = [".md", ".markdown"]
        self.supported_extensions = [ext.lower() for ext in self.supported_extensions]


class DirectoryScanner:
    """Discovers Markdown files under input paths, in a deterministic order."""

    def __init__(self, config: ScannerConfig = None):
        self.config = config or ScannerConfig()

    def scan_inputs(
        self,
        inputs: Iterable[str],
        max_depth: Optional[int] = None,
        errors: Optional[List[ReadError]] = None,
    ) -> Iterator[str]:
        """Scan several inputs, yielding files input by input."""
        for input_path in inputs:
            yield from self.scan(input_path, max_depth, errors)

    def scan(
        self,
        input_path: str,
        max_depth: Optional[int] = None,
        errors: Optional[List[ReadError]] = None,
    ) -> Iterator[str]:
        """
        Scan one input (a markdown file or a directory) for Markdown files.

        The input itself is at depth 0 and each directory level below it adds
        one, so max_depth=1 yields only the files directly inside a directory.

        Args:
            input_path: File or directory path as supplied by the caller
            max_depth: Deepest level to visit, None for unbounded recursion
            errors: When given, unreadable paths are appended here and
                skipped instead of raised

        Yields:
            Paths of Markdown files, joined onto input_path

        Raises:
            ReadError: If the input is missing or a directory cannot be
                listed, and no errors list was given
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        root_path = Path(input_path)
        if not root_path.exists():
            self._fail(ReadError(str(input_path), "Path not found"), errors)
            return

        visited: Set[Path] = set()
        for file_path in self._walk(root_path, 0, max_depth, visited, errors):
            yield str(file_path)

    def _walk(
        self,
        path: Path,
        depth: int,
        max_depth: Optional[int],
        visited: Set[Path],
        errors: Optional[List[ReadError]],
    ) -> Iterator[Path]:
        if max_depth is not None and depth > max_depth:
            return

        if not path.is_dir():
            if self._is_markdown_file(path):
                yield path
            elif depth == 0:
                logger.debug(f"Skipping non-markdown input: {path}")
            return

        resolved = path.resolve()
        if resolved in visited:
            logger.debug(f"Skipping already visited directory: {path}")
            return
        visited.add(resolved)

        try:
            entries = sorted(path.iterdir(), key=lambda item: item.name)
        except OSError as e:
            failure = ReadError(str(path), f"Failed to read directory: {e.strerror or e}")
            failure.__cause__ = e
            self._fail(failure, errors)
            return

        for item in entries:
            # Skip hidden files/directories if configured
            if self.config.skip_hidden_files and item.name.startswith("."):
                continue
            yield from self._walk(item, depth + 1, max_depth, visited, errors)

    @staticmethod
    def _fail(failure: ReadError, errors: Optional[List[ReadError]]):
        if errors is None:
            raise failure
        logger.warning(f"Skipping unreadable path: {failure}")
        errors.append(failure)

    def _is_markdown_file(self, file_path: Path) -> bool:
        """Check if file has a supported Markdown extension."""
        return file_path.is_file() and file_path.suffix.lower() in self.config.supported_extensions


def find_missing_paths(inputs: Iterable[str]) -> List[str]:
    """Return every input path that does not exist, in input order."""
    return [input_path for input_path in inputs if not Path(input_path).exists()]

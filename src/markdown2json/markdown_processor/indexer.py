"""File indexer that stamps sections with their source path."""

import logging
from pathlib import Path
from typing import List, Union

from .models import FileSectionRecord
from .parser import MarkdownParser
from .section_builder import SectionBuilder

logger = logging.getLogger(__name__)


class FileIndexer:
    """Sections one file and attaches its path to every section."""

    def __init__(self, builder: SectionBuilder = None, parser: MarkdownParser = None):
        self.builder = builder or SectionBuilder()
        self.parser = parser or MarkdownParser()

    def index_document(self, file_path: str, content: str) -> List[FileSectionRecord]:
        """
        Index already-read markdown content.

        Args:
            file_path: Path to attribute the sections to
            content: Markdown text of the file

        Returns:
            FileSectionRecord list in document order
        """
        sections = self.builder.build_sections(content)
        logger.debug(f"Indexed {len(sections)} sections from {file_path}")
        return [FileSectionRecord(file_path=file_path, section=section) for section in sections]

    def index_file(self, file_path: Union[str, Path]) -> List[FileSectionRecord]:
        """
        Read and index a markdown file.

        Raises:
            ReadError: If the file content cannot be read
        """
        content = self.parser.read_file(file_path)
        return self.index_document(str(file_path), content)

"""Aggregator that merges per-file sections into one ordered index."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..exceptions import AggregationError, ReadError
from .indexer import FileIndexer
from .models import FileSectionRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorPolicy(Enum):
    """What to do when a file cannot be indexed."""

    FAIL_FAST = "fail_fast"  # raise the first failure by input position
    COLLECT = "collect"  # attempt every file, then raise AggregationError


class Aggregator:
    """Runs the file indexer over many files, preserving input order."""

    def __init__(
        self,
        indexer: FileIndexer = None,
        max_workers: int = 1,
        error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST,
    ):
        """
        Initialize the aggregator.

        Args:
            indexer: File indexer to apply to each file
            max_workers: Files indexed concurrently (1 = sequential)
            error_policy: Fail-fast or collect-all handling of ReadError
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.indexer = indexer or FileIndexer()
        self.max_workers = max_workers
        self.error_policy = error_policy

    def aggregate(self, documents: Iterable[Tuple[str, str]]) -> List[FileSectionRecord]:
        """
        Index (file_path, content) pairs and concatenate the results.

        Returns:
            All records, ordered by input position then document order
        """
        return self._run(list(documents), lambda document: self.indexer.index_document(*document))

    def aggregate_paths(self, file_paths: Iterable[str]) -> List[FileSectionRecord]:
        """
        Read and index files, concatenating results in input order.

        Raises:
            ReadError: First unreadable file, under the fail-fast policy
            AggregationError: All unreadable files, under the collect policy
        """
        return self._run(list(file_paths), self.indexer.index_file)

    def _run(self, items: Sequence[T], index_one: Callable[[T], List[FileSectionRecord]]) -> List[FileSectionRecord]:
        results: List[Optional[List[FileSectionRecord]]] = [None] * len(items)
        failures: List[ReadError] = []

        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [executor.submit(index_one, item) for item in items]
                for position, future in enumerate(futures):
                    try:
                        results[position] = future.result()
                    except ReadError as e:
                        if self.error_policy is ErrorPolicy.FAIL_FAST:
                            self._cancel(futures[position + 1 :])
                            raise
                        failures.append(e)
        else:
            for position, item in enumerate(items):
                try:
                    results[position] = index_one(item)
                except ReadError as e:
                    if self.error_policy is ErrorPolicy.FAIL_FAST:
                        raise
                    failures.append(e)

        if failures:
            raise AggregationError(failures)

        index = [record for records in results for record in records]
        logger.info(f"Aggregated {len(index)} sections from {len(items)} files")
        return index

    @staticmethod
    def _cancel(futures: Iterable[Future]):
        for future in futures:
            future.cancel()

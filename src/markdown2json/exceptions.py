"""Custom exceptions for markdown2json."""

from typing import List


class Markdown2JsonError(Exception):
    """Base exception for markdown2json operations."""


class ReadError(Markdown2JsonError):
    """A discovered file or directory could not be read."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Failed to read {file_path}: {reason}")


class AggregationError(Markdown2JsonError):
    """One or more files failed while indexing with the collect-all policy."""

    def __init__(self, failures: List[ReadError]):
        self.failures = list(failures)
        lines = [f"{len(self.failures)} file(s) could not be indexed:"]
        lines.extend(f"  - {failure}" for failure in self.failures)
        super().__init__("\n".join(lines))


class ConfigError(Markdown2JsonError):
    """Invalid configuration value."""

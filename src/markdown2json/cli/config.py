"""Configuration management for the markdown2json CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..exceptions import ConfigError
from ..markdown_processor.aggregator import ErrorPolicy
from ..markdown_processor.output_formatter import CODE_BLOCK_SHAPES


class Config:
    """Configuration loaded from environment variables and an optional .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            if not Path(env_file).is_file():
                raise ConfigError(f"Configuration file not found: {env_file}")
            load_dotenv(env_file)
        else:
            # Load from the working directory .env
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Discovery
        self.markdown_file_extensions = [
            ext.strip() for ext in os.getenv("MARKDOWN_FILE_EXTENSIONS", ".md,.markdown").split(",") if ext.strip()
        ]
        self.skip_hidden_files = _get_bool("SKIP_HIDDEN_FILES", True)
        self.max_depth = _get_int("MAX_DEPTH", None, minimum=0)

        # Indexing
        self.index_workers = _get_int("INDEX_WORKERS", 1, minimum=1)
        self.strip_frontmatter = _get_bool("STRIP_FRONTMATTER", False)
        policy = os.getenv("INDEX_ERROR_POLICY", ErrorPolicy.FAIL_FAST.value).strip().lower()
        try:
            self.error_policy = ErrorPolicy(policy)
        except ValueError:
            raise ConfigError(f"INDEX_ERROR_POLICY must be one of fail_fast, collect; got {policy!r}")

        # Output
        self.code_block_shape = os.getenv("CODE_BLOCK_SHAPE", "string").strip().lower()
        if self.code_block_shape not in CODE_BLOCK_SHAPES:
            raise ConfigError(f"CODE_BLOCK_SHAPE must be one of string, object; got {self.code_block_shape!r}")
        indent = os.getenv("JSON_INDENT", "2").strip().lower()
        self.json_indent = None if indent == "none" else _parse_int("JSON_INDENT", indent, minimum=0)


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() == "true"


def _get_int(name: str, default: Optional[int], minimum: int) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return _parse_int(name, value.strip(), minimum)


def _parse_int(name: str, value: str, minimum: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if parsed < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {parsed}")
    return parsed

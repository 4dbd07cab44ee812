"""Tests for markdown directory scanner."""

import os
import tempfile
from pathlib import Path

import pytest

from markdown2json.exceptions import ReadError
from markdown2json.markdown_processor.scanner import DirectoryScanner, ScannerConfig, find_missing_paths

SAMPLES_DIR = Path(__file__).parent.parent.parent / "samples"


def relative(files, root):
    return [str(Path(f).relative_to(root)) for f in files]


class TestDirectoryScanner:
    """Test the DirectoryScanner component."""

    def test_scan_samples_directory(self):
        """Test scanning the samples directory in sorted order."""
        scanner = DirectoryScanner()

        files = list(scanner.scan(str(SAMPLES_DIR)))

        assert relative(files, SAMPLES_DIR) == [
            "getting-started.md",
            os.path.join("guides", "advanced", "internals.md"),
            os.path.join("guides", "configuration.md"),
        ]

    def test_paths_are_joined_onto_input(self):
        """Test that yielded paths start with the input path as given."""
        scanner = DirectoryScanner()

        files = list(scanner.scan(str(SAMPLES_DIR)))

        assert all(f.startswith(str(SAMPLES_DIR)) for f in files)

    def test_scanner_config_defaults(self):
        """Test scanner configuration defaults."""
        config = ScannerConfig()

        assert config.skip_hidden_files is True
        assert config.supported_extensions == [".md", ".markdown"]

    def test_scan_with_custom_extensions(self):
        """Test scanning with custom extensions."""
        config = ScannerConfig(supported_extensions=[".MD"])
        scanner = DirectoryScanner(config)

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)

            (temp_path / "test.md").write_text("# Test")
            (temp_path / "test.markdown").write_text("# Test")
            (temp_path / "test.txt").write_text("# Test")

            files = relative(scanner.scan(temp_dir), temp_path)

            assert files == ["test.md"]

    def test_extension_match_is_case_insensitive(self):
        """Test that upper-case extensions are recognized."""
        scanner = DirectoryScanner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / "README.MD").write_text("# Readme")
            (temp_path / "notes.Markdown").write_text("# Notes")

            files = relative(scanner.scan(temp_dir), temp_path)

            assert files == ["README.MD", "notes.Markdown"]

    def test_skip_hidden_files(self):
        """Test skipping hidden files and directories."""
        scanner = DirectoryScanner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)

            (temp_path / "visible.md").write_text("# Visible")
            (temp_path / ".hidden.md").write_text("# Hidden")

            hidden_dir = temp_path / ".hidden_dir"
            hidden_dir.mkdir()
            (hidden_dir / "nested.md").write_text("# Nested")

            files = relative(scanner.scan(temp_dir), temp_path)

            assert files == ["visible.md"]

    def test_include_hidden_files(self):
        """Test that hidden entries are visited when configured."""
        scanner = DirectoryScanner(ScannerConfig(skip_hidden_files=False))

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / ".hidden.md").write_text("# Hidden")

            files = relative(scanner.scan(temp_dir), temp_path)

            assert files == [".hidden.md"]

    def test_depth_limits(self):
        """Test depth-bounded traversal relative to the input directory."""
        scanner = DirectoryScanner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / "root.md").write_text("# Root")
            docs_dir = temp_path / "docs"
            docs_dir.mkdir()
            (docs_dir / "guide.md").write_text("# Guide")
            nested_dir = docs_dir / "nested"
            nested_dir.mkdir()
            (nested_dir / "deep.md").write_text("# Deep")

            def scan(depth):
                return relative(scanner.scan(temp_dir, max_depth=depth), temp_path)

            assert scan(0) == []
            assert scan(1) == ["root.md"]
            assert scan(2) == [os.path.join("docs", "guide.md"), "root.md"]
            assert scan(None) == [
                os.path.join("docs", "guide.md"),
                os.path.join("docs", "nested", "deep.md"),
                "root.md",
            ]

    def test_file_input(self):
        """Test that a markdown file given directly is yielded at any depth."""
        scanner = DirectoryScanner()
        sample = SAMPLES_DIR / "getting-started.md"

        assert list(scanner.scan(str(sample), max_depth=0)) == [str(sample)]

    def test_non_markdown_file_input_is_skipped(self):
        """Test that a non-markdown file given directly yields nothing."""
        scanner = DirectoryScanner()

        assert list(scanner.scan(str(SAMPLES_DIR / "notes.txt"))) == []

    def test_scan_inputs_preserves_order(self):
        """Test that several inputs are scanned in the order supplied."""
        scanner = DirectoryScanner()
        first = SAMPLES_DIR / "guides" / "configuration.md"
        second = SAMPLES_DIR / "getting-started.md"

        files = list(scanner.scan_inputs([str(first), str(second)]))

        assert files == [str(first), str(second)]

    def test_symlink_cycle_is_not_followed_forever(self):
        """Test that a directory symlink pointing at its parent is visited once."""
        scanner = DirectoryScanner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / "doc.md").write_text("# Doc")
            try:
                (temp_path / "loop").symlink_to(temp_path, target_is_directory=True)
            except (OSError, NotImplementedError):
                pytest.skip("symlinks not supported")

            files = relative(scanner.scan(temp_dir), temp_path)

            assert files == ["doc.md"]

    def test_nonexistent_path(self):
        """Test error handling for nonexistent input."""
        scanner = DirectoryScanner()

        with pytest.raises(ReadError) as exc_info:
            list(scanner.scan("/nonexistent/path"))

        assert exc_info.value.file_path == "/nonexistent/path"
        assert exc_info.value.reason == "Path not found"

    def test_nonexistent_path_recorded_when_collecting(self):
        """Test that a missing input is recorded and skipped when an errors list is given."""
        scanner = DirectoryScanner()
        errors = []

        files = list(scanner.scan_inputs(["/nonexistent/path", str(SAMPLES_DIR / "getting-started.md")], errors=errors))

        assert files == [str(SAMPLES_DIR / "getting-started.md")]
        assert [e.file_path for e in errors] == ["/nonexistent/path"]

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="needs an unprivileged user")
    def test_unlistable_directory(self):
        """Test that a directory without read permission raises or is recorded."""
        scanner = DirectoryScanner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / "a.md").write_text("# A")
            locked = temp_path / "locked"
            locked.mkdir()
            locked.chmod(0)
            try:
                with pytest.raises(ReadError):
                    list(scanner.scan(temp_dir))

                errors = []
                files = relative(scanner.scan(temp_dir, errors=errors), temp_path)

                assert files == ["a.md"]
                assert [e.file_path for e in errors] == [str(locked)]
            finally:
                locked.chmod(0o755)

    def test_negative_depth(self):
        """Test that a negative depth is rejected."""
        scanner = DirectoryScanner()

        with pytest.raises(ValueError):
            list(scanner.scan(str(SAMPLES_DIR), max_depth=-1))


class TestFindMissingPaths:
    """Test input existence validation."""

    def test_reports_all_missing(self):
        inputs = [str(SAMPLES_DIR), "/nonexistent/one.md", "/nonexistent/two"]

        assert find_missing_paths(inputs) == ["/nonexistent/one.md", "/nonexistent/two"]

    def test_all_present(self):
        assert find_missing_paths([str(SAMPLES_DIR)]) == []

"""Unit tests for CLI entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from object_space.cli import create_parser, main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCreateParser:
    """Tests for create_parser function."""

    def test_check_arguments(self):
        """check takes a path and an optional verbose flag."""
        args = create_parser().parse_args(["check", "cfg.toml", "-v"])
        assert args.command == "check"
        assert args.config_path == Path("cfg.toml")
        assert args.verbose is True

    def test_command_required(self):
        """A subcommand is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


class TestCheckCommand:
    """Tests for the check subcommand."""

    def test_valid_file(self, capsys):
        """A valid file exits 0 with a summary."""
        code = main(["check", str(FIXTURES / "checkerboard_detector.toml")])
        assert code == 0
        out = capsys.readouterr().out
        assert "Configuration valid" in out
        assert "'checkerboard' (8x6, 35 inner corners)" in out

    def test_missing_file(self, capsys):
        """A missing file exits 1."""
        code = main(["check", str(FIXTURES / "i-do-not-exist.toml")])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_syntax_error(self, capsys):
        """A non-TOML file exits 2."""
        code = main(["check", str(FIXTURES / "not_toml.png")])
        assert code == 2
        assert "Invalid TOML" in capsys.readouterr().err

    def test_schema_error(self, capsys):
        """A file without a camera table exits 3."""
        code = main(["check", str(FIXTURES / "build_manifest.toml")])
        assert code == 3
        assert "missing field: camera" in capsys.readouterr().err


class TestDocsCommand:
    """Tests for the docs subcommand."""

    def test_prints_every_variant(self, capsys):
        """docs prints a section for each detector and descriptor."""
        assert main(["docs"]) == 0
        out = capsys.readouterr().out
        assert "# Checkerboard" in out
        assert "# Charuco" in out
        assert "# DetectorDefined" in out

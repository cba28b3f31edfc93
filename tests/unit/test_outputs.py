"""Tests for step outputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from pr_changelog.action.outputs import format_output, set_output

if TYPE_CHECKING:
    from pathlib import Path


class TestSetOutput:
    """Tests for set_output()."""

    def test_writes_multiline_value(self, tmp_path: Path):
        """Values are appended with the delimiter syntax."""
        output_file = tmp_path / "output"
        env = {"GITHUB_OUTPUT": str(output_file)}

        set_output("content", "# ✨ Changelog\n\n- a", environ=env)
        set_output("next-version", "1.3.0", environ=env)

        lines = output_file.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("content<<ghadelimiter_")
        assert lines[1:4] == ["# ✨ Changelog", "", "- a"]
        assert lines[4] == lines[0].split("<<", 1)[1]
        assert lines[5].startswith("next-version<<")
        assert lines[6] == "1.3.0"

    def test_prints_without_github_output(self):
        """Outside Actions the value is printed."""
        console = Console(record=True, width=120)
        set_output("next-version", "[skip] 1.3.0", environ={}, console=console)

        text = console.export_text()
        assert "next-version" in text
        assert "[skip] 1.3.0" in text


class TestFormatOutput:
    """Tests for format_output()."""

    def test_fixed_delimiter(self):
        assert format_output("a", "b", delimiter="EOF") == "a<<EOF\nb\nEOF\n"

    def test_delimiter_in_value(self):
        with pytest.raises(ValueError):
            format_output("a", "x\nEOF\n", delimiter="EOF")

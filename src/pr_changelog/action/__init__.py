"""GitHub Actions runtime helpers."""

from __future__ import annotations

from pr_changelog.action.outputs import set_output

__all__ = ["set_output"]

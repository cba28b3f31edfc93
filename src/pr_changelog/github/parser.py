"""Conversion of GitHub API payloads into core types."""

from __future__ import annotations

from typing import Any


def parse_commit_messages(items: list[dict[str, Any]]) -> dict[str, str]:
    """Map sha -> message for pull request commits.

    Keeps the API order; a sha listed twice keeps its first position and
    its last message. Entries without a sha are ignored.
    """
    messages: dict[str, str] = {}
    for item in items:
        sha = item.get("sha")
        if not sha:
            continue
        messages[sha] = ((item.get("commit") or {}).get("message")) or ""
    return messages

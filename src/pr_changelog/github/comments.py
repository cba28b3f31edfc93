"""Idempotent changelog comment.

The action keeps a single changelog comment per pull request. Its body
starts with a banner; on every run the most recent comment written by the
bot that contains the banner is replaced, otherwise a new one is created.

Two concurrent runs on the same pull request may both create a comment;
the last writer wins, which is acceptable because runs are triggered one
at a time per pull request event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pr_changelog.config.models import DEFAULT_BOT_LOGIN
from pr_changelog.core.changelog import BANNER

if TYPE_CHECKING:
    from pr_changelog.github.client import GitHubClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExistingComment:
    id: int
    body: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ExistingComment:
        return cls(id=int(data["id"]), body=data.get("body") or "")


class CommentUpsertGateway:
    """Create or replace the bot's changelog comment on a pull request."""

    def __init__(
        self,
        client: GitHubClient,
        owner: str,
        repo: str,
        bot_login: str = DEFAULT_BOT_LOGIN,
        banner: str = BANNER,
    ) -> None:
        self.client = client
        self.owner = owner
        self.repo = repo
        self.bot_login = bot_login
        self.banner = banner

    def _is_own(self, comment: dict[str, Any]) -> bool:
        login = (comment.get("user") or {}).get("login")
        return login == self.bot_login and self.banner in (comment.get("body") or "")

    def find_previous(self, pr_number: int) -> ExistingComment | None:
        """Most recent bot comment carrying the banner, if any."""
        comments = self.client.list_issue_comments(self.owner, self.repo, pr_number)
        for comment in reversed(comments):
            if self._is_own(comment):
                return ExistingComment.from_api(comment)
        return None

    def upsert(self, pr_number: int, body: str) -> ExistingComment:
        """Replace the previous changelog comment or create a new one."""
        previous = self.find_previous(pr_number)
        if previous is not None:
            logger.info("Updating previous comment %d", previous.id)
            data = self.client.update_issue_comment(self.owner, self.repo, previous.id, body)
        else:
            logger.info("Creating new comment")
            data = self.client.create_issue_comment(self.owner, self.repo, pr_number, body)
        return ExistingComment.from_api(data)

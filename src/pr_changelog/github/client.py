"""GitHub REST API client.

A thin synchronous wrapper over :class:`httpx.Client` covering the
endpoints the action uses: pull request commits and issue comments.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pr_changelog.config.models import GitHubConfig
from pr_changelog.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)

USER_AGENT = "pr-changelog"


class GitHubClient:
    """Client for the GitHub REST API v3."""

    def __init__(
        self,
        token: str,
        config: GitHubConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: Token with read access to pull requests and write access to issues
            config: API settings (base URL, timeout, page size)
            transport: Optional transport, used by tests to stub the API
        """
        self.config = config or GitHubConfig()
        self._client = httpx.Client(
            base_url=self.config.api_url.rstrip("/"),
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": USER_AGENT,
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=self.config.timeout,
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Send a request and decode the JSON response.

        Raises:
            GitHubAPIError: On transport errors, non-2xx responses and non-JSON bodies
        """
        try:
            response = self._client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Request to {endpoint} failed: {e}") from e

        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = response.reason_phrase
            if isinstance(data, dict):
                message = data.get("message", message)
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} {method} {endpoint} - {message}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"Invalid JSON in response to {method} {endpoint}",
                status_code=response.status_code,
            ) from e

    def _paginate(self, endpoint: str) -> list[dict[str, Any]]:
        per_page = self.config.per_page
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            batch = self._request("GET", endpoint, params={"per_page": per_page, "page": page}) or []
            items.extend(batch)
            if len(batch) < per_page:
                return items
            page += 1

    def list_pull_request_commits(self, owner: str, repo: str, pr_number: int) -> list[dict[str, Any]]:
        """Commits of a pull request, oldest first."""
        return self._paginate(f"/repos/{owner}/{repo}/pulls/{pr_number}/commits")

    def list_issue_comments(self, owner: str, repo: str, issue_number: int) -> list[dict[str, Any]]:
        """Comments of an issue or pull request, oldest first."""
        return self._paginate(f"/repos/{owner}/{repo}/issues/{issue_number}/comments")

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict[str, Any]:
        logger.debug("Creating comment on %s/%s#%d", owner, repo, issue_number)
        return self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )

    def update_issue_comment(self, owner: str, repo: str, comment_id: int, body: str) -> dict[str, Any]:
        logger.debug("Updating comment %d on %s/%s", comment_id, owner, repo)
        return self._request(
            "PATCH",
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}",
            json={"body": body},
        )

"""Git command wrapper.

Only the handful of commands the action needs: refreshing remote refs and
listing the files changed by a commit. Commands run as subprocesses and
their output is captured.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pr_changelog.exceptions import GitError

logger = logging.getLogger(__name__)


class GitRepository:
    """A local git checkout."""

    def __init__(self, path: Path | str | None = None, remote: str = "origin") -> None:
        self.path = Path(path) if path else Path.cwd()
        self.remote = remote

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or the command fails
        """
        cmd = ["git", *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def prune(self) -> None:
        """Drop remote-tracking refs that no longer exist on the remote."""
        self._run("fetch", "--prune", self.remote)

    def fetch_branch(self, branch: str) -> None:
        """Fetch ``branch`` from the remote without tags."""
        self._run("fetch", "--no-tags", self.remote, branch)

    def changed_files(self, sha: str) -> tuple[str, ...]:
        """List the paths touched by commit ``sha``, in git's order."""
        output = self._run("diff-tree", "--no-commit-id", "--name-only", "-r", "--root", sha)
        return tuple(line for line in output.splitlines() if line.strip())

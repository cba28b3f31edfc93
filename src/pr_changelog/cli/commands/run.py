"""Implementation of the 'run' command.

The run command is the action entry point: it collects the pull request
commits, renders the changelog, publishes it as a comment and sets the
``content`` and ``next-version`` outputs.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from rich.panel import Panel

from pr_changelog.action.outputs import set_output
from pr_changelog.config import load_config, load_inputs
from pr_changelog.core.commits import Commit
from pr_changelog.core.pipeline import PipelineResult, run_pipeline
from pr_changelog.exceptions import PrChangelogError
from pr_changelog.github import CommentUpsertGateway, GitHubClient, parse_commit_messages
from pr_changelog.vcs import GitRepository

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from pr_changelog.config import ActionInputs, PrChangelogConfig


def collect_commits(
    messages: Mapping[str, str],
    repo: GitRepository,
    max_workers: int = 8,
) -> tuple[Commit, ...]:
    """Attach changed files to every commit.

    One git call per sha runs in a thread pool; the result is only
    returned once every call has finished, in the order of ``messages``.
    """
    shas = list(messages)
    if not shas:
        return ()

    with ThreadPoolExecutor(max_workers=min(max_workers, len(shas))) as pool:
        files = list(pool.map(repo.changed_files, shas))

    return tuple(
        Commit(sha=sha, message=messages[sha], files=changed)
        for sha, changed in zip(shas, files, strict=True)
    )


def execute_run(
    inputs: ActionInputs,
    config: PrChangelogConfig,
    client: GitHubClient,
    repo: GitRepository,
    console: Console,
    *,
    dry_run: bool = False,
    environ: Mapping[str, str] | None = None,
) -> PipelineResult:
    """Run the action against already constructed collaborators."""
    console.print("Generating changelog....")
    console.print(f"Current version: [cyan]{inputs.current_version or '-'}[/]")
    console.print(f"Branch: [cyan]{inputs.branch}[/]")

    repo.prune()
    repo.fetch_branch(inputs.branch)

    raw = client.list_pull_request_commits(inputs.owner, inputs.repo, inputs.pr_number)
    commits = collect_commits(parse_commit_messages(raw), repo, config.max_workers)
    console.print(f"Found [cyan]{len(commits)}[/] commit(s) in pull request #{inputs.pr_number}")

    result = run_pipeline(commits, inputs.current_version, config)

    if dry_run:
        console.print(Panel(result.content, title="[yellow]Dry Run Preview[/]", border_style="yellow"))
    else:
        console.print("Posting change log to pull request comments")
        gateway = CommentUpsertGateway(
            client,
            inputs.owner,
            inputs.repo,
            bot_login=config.github.bot_login,
            banner=config.changelog.banner,
        )
        gateway.upsert(inputs.pr_number, result.content)
        set_output("content", result.content, environ=environ, console=console)

    if inputs.current_version is None:
        console.print("[yellow]No current version configured, skipping next-version.[/]")
    elif result.version_error:
        console.print(f"[yellow]Ignored to bump new version:[/] {result.version_error}")
    elif result.next_version is None:
        console.print(f"[yellow]No releasable changes, staying at {result.current_version}.[/]")
    else:
        console.print(f"New version: [green]{result.next_version}[/] ({result.mask})")
        if not dry_run:
            set_output("next-version", str(result.next_version), environ=environ, console=console)

    return result


def run_changelog(
    path: str | None,
    dry_run: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the run command.

    Args:
        path: Optional path to the checked out repository
        dry_run: Render only; do not comment or set outputs
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
        inputs = load_inputs()
    except PrChangelogError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    repo = GitRepository(project_path)

    try:
        with GitHubClient(inputs.token.get_secret_value(), config.github) as client:
            execute_run(inputs, config, client, repo, console, dry_run=dry_run)
    except PrChangelogError as e:
        err_console.print(f"[red]Failed due to:[/] {e}")
        raise SystemExit(1) from e

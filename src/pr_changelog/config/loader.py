"""Configuration loading.

Tool settings come from the optional ``[tool.pr-changelog]`` table in
``pyproject.toml``. Run inputs come from the GitHub Actions environment:
``INPUT_*`` variables and the webhook payload at ``GITHUB_EVENT_PATH``.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from pr_changelog.config.models import ActionInputs, PrChangelogConfig
from pr_changelog.exceptions import ConfigNotFoundError, ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

TOOL_TABLE = "pr-changelog"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Search ``start`` and its parents for pyproject.toml.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or any parent directory")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file."""
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.pr-changelog]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_TABLE, {})


def load_config(path: Path | None = None) -> PrChangelogConfig:
    """Load tool configuration, falling back to defaults.

    Args:
        path: Directory to start searching from (defaults to cwd)

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If the table exists but is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
        return PrChangelogConfig()

    data = extract_tool_config(load_pyproject_toml(pyproject_path))
    try:
        return PrChangelogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_TABLE}] in {pyproject_path}:\n{e}") from e


def _input(environ: Mapping[str, str], name: str) -> str | None:
    # GitHub exposes action input "foo-bar" as INPUT_FOO-BAR
    value = environ.get(f"INPUT_{name.upper()}")
    if value is None or not value.strip():
        return None
    return value.strip()


def load_event_payload(environ: Mapping[str, str]) -> dict[str, Any]:
    """Read the webhook payload that triggered the workflow."""
    event_path = environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise ConfigNotFoundError("GITHUB_EVENT_PATH is not set; not running inside GitHub Actions?")

    path = Path(event_path)
    if not path.is_file():
        raise ConfigNotFoundError(f"Event payload not found: {path}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid event payload in {path}: {e}") from e


def load_inputs(environ: Mapping[str, str] | None = None) -> ActionInputs:
    """Build :class:`ActionInputs` from the action environment.

    The token is read from the ``token`` input, then from a ``token`` or
    ``GITHUB_TOKEN`` environment variable.

    Raises:
        ConfigValidationError: If the token, branch or pull request is missing
    """
    env = os.environ if environ is None else environ

    token = _input(env, "token") or env.get("token") or env.get("GITHUB_TOKEN")
    if not token:
        raise ConfigValidationError("Missing auth token")

    branch = _input(env, "branch")
    if branch is None:
        raise ConfigValidationError("Missing branch")

    payload = load_event_payload(env)
    pull_request = payload.get("pull_request")
    if not pull_request:
        raise ConfigValidationError("Event payload has no pull_request; trigger the action on pull_request events")

    repository = payload.get("repository") or {}
    try:
        return ActionInputs(
            token=token,
            branch=branch,
            current_version=_input(env, "version"),
            pr_number=pull_request.get("number"),
            owner=(repository.get("owner") or {}).get("login", ""),
            repo=repository.get("name", ""),
        )
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid action inputs:\n{e}") from e

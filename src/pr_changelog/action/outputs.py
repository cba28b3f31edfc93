"""Step outputs.

Outputs are appended to the file named by ``GITHUB_OUTPUT``. Values are
always written with the multi-line ``name<<DELIMITER`` syntax so markdown
bodies survive unchanged.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import Mapping


def format_output(name: str, value: str, delimiter: str | None = None) -> str:
    delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in value:
        raise ValueError(f"Output value for {name!r} contains the delimiter")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(
    name: str,
    value: str,
    environ: Mapping[str, str] | None = None,
    console: Console | None = None,
) -> None:
    """Set a step output, printing it instead when not running in Actions."""
    env = os.environ if environ is None else environ
    output_path = env.get("GITHUB_OUTPUT")

    if not output_path:
        console = console or Console()
        console.print(f"[dim]output[/] [cyan]{name}[/]:")
        console.print(value, markup=False, highlight=False)
        return

    with Path(output_path).open("a", encoding="utf-8") as f:
        f.write(format_output(name, value))

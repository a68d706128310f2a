"""Rendering ServiceResults for the terminal.

Humans get an ``OK:``/``ERROR:`` line followed by indented ``key: value``
lines; ``--json`` prints the whole result model.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blogadmin.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _field_lines(fields: Mapping[str, Any]) -> Iterator[str]:
    for key, value in fields.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        yield f"  {key}: {value}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Quiet keeps only the status line; verbose adds ``meta`` after the data."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        reason = result.error.message if result.error is not None else "Unknown error"
        return f"ERROR: {result.op} - {reason}"

    lines = [f"OK: {result.op}"]
    if not settings.quiet:
        lines.extend(_field_lines(result.data))
    if settings.verbose and result.meta:
        lines.extend(_field_lines(result.meta))
    return "\n".join(lines)

"""Output mode dispatch for ServiceResult.

``--json`` serializes the result, ``--quiet`` prints a one-line status,
and the default mode goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from jvmsctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from jvmsctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related flags extracted from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)

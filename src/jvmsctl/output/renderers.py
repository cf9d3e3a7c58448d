"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from jvmsctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from jvmsctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="jvms.ok"), Text(f"  {result.op}", style="jvms.op"))


def _key_values(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if value is None:
            value = "-"
        elif isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "-"
        console.print(Text(f"  {key}: ", style="jvms.key"), Text(str(value)), sep="", soft_wrap=True)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _key_values(console, result.data)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="jvms.error"), Text(f"  {result.op}", style="jvms.op"))
    console.print(f"  {message}", markup=False, soft_wrap=True)
    if verbose and error is not None:
        console.print(Text(f"  code: {error.code}", style="jvms.key"))
        for key, value in error.detail.items():
            console.print(Text(f"  {key}: {value}", style="jvms.key"))


def _render_toolchain_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No toolchains registered.")
        return
    table = Table(title="Toolchains", title_justify="left", show_edge=False)
    table.add_column("", width=1)
    table.add_column("Name", style="jvms.name")
    table.add_column("JAVA_HOME", style="jvms.path", overflow="fold")
    for item in items:
        marker = Text("*", style="jvms.default") if item["default"] else Text("")
        table.add_row(marker, item["name"], item["java_home"])
    console.print(table)


def _render_override_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No overrides registered.")
        return
    table = Table(title="Overrides", title_justify="left", show_edge=False)
    table.add_column("Directory", style="jvms.path", overflow="fold")
    table.add_column("Toolchain", style="jvms.name")
    for item in items:
        table.add_row(item["path"], item["toolchain"])
    console.print(table)


def _render_default_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    default = result.data.get("default")
    console.print(Text("Default toolchain: ", style="jvms.key"), Text(default or "None"), sep="")
    if verbose and result.data.get("java_home"):
        console.print(Text(f"  JAVA_HOME = {result.data['java_home']}", style="jvms.path"))


def _render_current(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    console.print(
        Text(data["toolchain"], style="jvms.name"),
        Text(f"  ({data['source']})", style="jvms.key"),
    )
    console.print(Text(f"  JAVA_HOME = {data['java_home']}", style="jvms.path"))
    if data.get("override_path"):
        console.print(Text(f"  pinned at {data['override_path']}", style="jvms.path"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "toolchain_list": _render_toolchain_list,
    "override_list": _render_override_list,
    "default_get": _render_default_get,
    "current": _render_current,
}

"""Rich/JSON output for ServiceResult.

The CLI renders results for humans (Rich tables and key-value fields),
for machines (``--json``), or as bare UIDs (``--quiet``). Renderers are
dispatched by ``result.op``; unknown ops fall through to a generic
key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from rulepred.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rulepred.services.result import ServiceResult

NONE_LABEL = "(none)"


class OutputSettings(BaseModel):
    """Output mode selected by the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: one UID (or namespace) per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        lines: list[str] = []
        for item in items:
            key = "uid" if "uid" in item else "namespace"
            value = item.get(key)
            lines.append(NONE_LABEL if value is None else str(value))
        return "\n".join(lines)
    if result.op == "get_namespace":
        namespace = result.data.get("namespace")
        return NONE_LABEL if namespace is None else str(namespace)
    return f"OK: {result.op}"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _optional(value: Any, style: str) -> Text:
    if value is None:
        return Text(NONE_LABEL, style="rp.none")
    return Text(str(value), style=style)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rp.ok"), Text(f"  {result.op}", style="rp.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="rp.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    elif key == "uid":
        v = _optional(value, "rp.uid")
    elif key == "namespace":
        v = _optional(value, "rp.namespace")
    else:
        v = _optional(value, "")
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="rp.error"), Text(f"  {result.op}", style="rp.op"), "-", msg)
    if verbose and err and err.detail:
        for k, v in err.detail.items():
            _field(console, k, v)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "matched", f"{d.get('count', 0)} of {d.get('total', 0)}")

    items = d.get("items", [])
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("UID", style="rp.uid", no_wrap=True)
        table.add_column("Namespace", style="rp.namespace")
        table.add_column("Name")
        table.add_column("Tags", style="rp.tag")
        if verbose:
            table.add_column("Visibility", style="dim")
        for item in items:
            row = [
                _optional(item.get("uid"), ""),
                _optional(item.get("namespace"), ""),
                _optional(item.get("name"), ""),
                Text(", ".join(item.get("tags", []))),
            ]
            if verbose:
                row.append(Text(str(item.get("visibility", ""))))
            table.add_row(*row)
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_namespaces(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Namespace", style="rp.namespace")
    table.add_column("Rules", justify="right")
    for item in result.data.get("items", []):
        table.add_row(_optional(item.get("namespace"), ""), str(item.get("count", 0)))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "filter_rules": _render_rules,
    "list_namespaces": _render_namespaces,
}

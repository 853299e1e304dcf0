"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; dispatch is by
``result.op`` with a fallback that prints ``data["text"]``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from timeman.domain.types import SPAN_OPERATIONS, Operation
from timeman.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timeman.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_value)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == Operation.HELP_FORMAT:
        return "\n".join(item["directive"] for item in result.data.get("items", []))

    return str(result.data.get("text", ""))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print ``data["text"]`` verbatim, then the other fields when verbose."""
    console.out(str(result.data.get("text", "")), highlight=False)
    if verbose:
        _render_fields(console, {k: v for k, v in result.data.items() if k != "text"})
        if result.meta:
            _render_fields(console, result.meta)


def _render_span(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.out(str(result.data.get("text", "")), highlight=False)
    if not verbose:
        return
    data = result.data
    _render_fields(
        console,
        {
            "encoded": data.get("encoded"),
            "seconds": data.get("seconds"),
            "nanoseconds": data.get("nanoseconds"),
        },
    )
    units = Text("  units: ", style="tm.key")
    units.append(", ".join(data.get("units", [])) or "(none)", style="tm.unit")
    console.print(units, soft_wrap=True)


def _render_format_help(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items: list[dict[str, str]] = result.data.get("items", [])
    if result.data.get("mode") == "exact":
        item = items[0]
        line = Text(item["directive"], style="tm.directive")
        line.append(f" : {item['description']}")
        console.print(line, soft_wrap=True)
        return

    pad = max((len(item["directive"]) for item in items), default=0)
    for item in items:
        line = Text(item["directive"].ljust(pad), style="tm.directive")
        line.append(f" : {item['description']}")
        console.print(line, soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    line = Text("ERROR", style="tm.error")
    line.append(f": {result.op} - {msg}")
    console.print(line, soft_wrap=True)
    if verbose and result.error is not None:
        _render_fields(console, {"code": result.error.code, **result.error.detail})


def _render_fields(console: Console, fields: dict[str, Any]) -> None:
    for key, value in fields.items():
        line = Text(f"  {key}: ", style="tm.key")
        line.append(str(value))
        console.print(line, soft_wrap=True)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    **{op: _render_span for op in SPAN_OPERATIONS},
    Operation.HELP_FORMAT: _render_format_help,
}

"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from romanctl.output.console import create_console, get_output, style_for_place

if TYPE_CHECKING:
    from rich.console import Console

    from romanctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "decode":
        return str(d["value"])
    if result.op == "encode":
        return str(d["numeral"])
    if result.op == "check":
        return "canonical" if d["canonical"] else "not canonical"
    if result.op == "convert":
        return "\n".join(_converted(item) for item in d["items"])
    if result.op == "table":
        return "\n".join(f"{item['symbol']} {item['value']}" for item in d["items"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _converted(item: dict[str, Any]) -> str:
    """The output side of one convert item."""
    if item["direction"] == "encode":
        return str(item["numeral"])
    return str(item["value"])


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="roman.ok")
    op = Text(f"  {result.op}", style="roman.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="roman.key")
    if key == "numeral":
        v = Text(str(value), style="roman.numeral")
    elif key == "value":
        v = Text(str(value), style="roman.value")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="roman.error")
    op = Text(f"  {result.op}", style="roman.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_conversion(result: ServiceResult, console: Console) -> None:
    """Render decode/encode with the input side first."""
    _status_line(console, result)
    keys = ("numeral", "value") if result.op == "decode" else ("value", "numeral")
    for key in keys:
        _field(console, key, result.data[key])


def _render_check(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "numeral", d["numeral"])
    verdict = Text("yes", style="roman.ok") if d["canonical"] else Text("no", style="roman.error")
    console.print(Text("  canonical: ", style="roman.key"), verdict, sep="")
    if d["value"] is not None:
        _field(console, "value", d["value"])


def _render_convert(result: ServiceResult, console: Console) -> None:
    """Render a convert batch as an input → output table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Input")
    table.add_column("Direction", style="roman.op")
    table.add_column("Output", style="roman.numeral")

    for item in result.data["items"]:
        table.add_row(
            str(item["index"]), Text(item["input"]), item["direction"], _converted(item)
        )
    console.print(table)

    # Failed tokens reach stderr as warnings; only the tally shows here
    summary = f"\n{result.data['count']} converted"
    if result.data["errors"]:
        summary += f", {len(result.data['errors'])} failed"
    console.print(summary)


def _render_table(result: ServiceResult, console: Console) -> None:
    """Render the symbol table grouped by place."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Place")
    table.add_column("Symbol", style="roman.numeral", no_wrap=True)
    table.add_column("Value", style="roman.value", justify="right")

    for item in result.data["items"]:
        place = item["place"]
        table.add_row(Text(place, style=style_for_place(place)), item["symbol"], str(item["value"]))
    console.print(table)
    console.print(f"\n{result.data['count']} clusters")


_OP_RENDERERS: dict[str, Renderer] = {
    "decode": _render_conversion,
    "encode": _render_conversion,
    "check": _render_check,
    "convert": _render_convert,
    "table": _render_table,
}

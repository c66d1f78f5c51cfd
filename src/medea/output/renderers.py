"""Operation-specific Rich renderers for ToolResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to the plain text renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from medea.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from medea.services.result import ToolResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ToolResult, *, color: bool = False, verbose: bool = False) -> str:
    """Render a ToolResult to a string, styled only when *color* is set."""
    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_text)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def pretty_json(value: Any) -> str:
    """Deterministic pretty JSON: two-space indent, sorted keys."""
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    code = err.code if err else "UNKNOWN"
    msg = err.message if err else "Unknown error"
    console.print(Text("error", style="medea.error"), Text(f"[{code}]: ", style="medea.code"), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="medea.key"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_text(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    """Print each ``text`` line as-is."""
    for line in result.data.get("text", []):
        console.print(line)


def _render_jwt(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    console.print(Text("header:", style="medea.heading"))
    console.print(pretty_json(data["header"]))
    console.print()
    console.print(Text("payload:", style="medea.heading"))
    console.print(pretty_json(data["payload"]))
    console.print()
    console.print(Text("signature:", style="medea.heading"))

    verified = data.get("verified")
    if verified is None:
        style = "medea.unchecked"
    else:
        style = "medea.valid" if verified else "medea.invalid"
    console.print(Text(data["signature_status"], style=style))
    if verbose:
        console.print(Text(data["signature"], style="medea.key"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "jwt_decode": _render_jwt,
}

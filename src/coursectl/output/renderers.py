"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` through :data:`_OP_RENDERERS`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from coursectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from coursectl.services.result import ServiceResult


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
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Renderers ─────────────────────────────────────────────────────────


def _header(result: ServiceResult, console: Console) -> None:
    line = Text()
    line.append("OK", style="course.ok")
    line.append(": ")
    line.append(result.op, style="course.op")
    console.print(line)


def _render_course(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(result, console)
    data = result.data
    category = data.get("category") or {}
    rows: list[tuple[str, Text]] = [
        ("id", Text(str(data.get("id", "")), style="course.id")),
        ("name", Text(str(data.get("name", "")), style="course.name")),
        (
            "category",
            Text(f"{category.get('name', '')} (#{category.get('id', '')})", style="course.category"),
        ),
        ("description", Text(str(data.get("description", "")))),
    ]
    if "changed" in data:
        rows.append(("changed", Text(", ".join(data["changed"]) or "-")))
    for key, value in rows:
        line = Text(f"  {key}: ", style="course.key")
        line.append_text(value)
        console.print(line)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print("No courses.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="course.id", justify="right")
    table.add_column("Name", style="course.name")
    table.add_column("Category", style="course.category")
    if verbose:
        table.add_column("Description")
    for item in items:
        row = [str(item["id"]), item["name"], item["category"]["name"]]
        if verbose:
            row.append(item.get("description", ""))
        table.add_row(*row)
    console.print(table)


def _render_walkthrough(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _header(result, console)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Step")
    table.add_column("OK")
    table.add_column("Course")
    table.add_column("Description")
    for step in result.data.get("steps", []):
        table.add_row(
            step["step"],
            "yes" if step.get("ok") else "no",
            str(step.get("name", step.get("id", ""))),
            str(step.get("description", "")),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(result, console)
    for key, value in result.data.items():
        line = Text(f"  {key}: ", style="course.key")
        line.append(str(value))
        console.print(line)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    line = Text()
    line.append("ERROR", style="course.error")
    line.append(f": {result.op}: ")
    line.append(result.error.message if result.error else "Unknown error")
    console.print(line)
    if verbose and result.error is not None:
        console.print(Text(f"  code: {result.error.code}", style="course.key"))
        for key, value in result.error.detail.items():
            console.print(Text(f"  {key}: {value}", style="course.key"))


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "create_course": _render_course,
    "get_course": _render_course,
    "update_course": _render_course,
    "list_courses": _render_list,
    "walkthrough": _render_walkthrough,
}

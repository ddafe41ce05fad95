"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tierctl.output.console import create_console, get_output, style_for_color

if TYPE_CHECKING:
    from rich.console import Console

    from tierctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
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

    if result.op == "export" and "content" in result.data:
        return str(result.data["content"])
    if "id" in result.data:
        return str(result.data["id"])
    imported = result.data.get("imported")
    if isinstance(imported, list):
        return "\n".join(str(entry.get("id", "")) for entry in imported)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tier.ok")
    op = Text(f"  {result.op}", style="tier.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tier.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="tier.id")
    elif key in ("path", "restored_from"):
        v = Text(str(value), style="tier.path")
    elif key == "label":
        v = Text(str(value), style="tier.label")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value) or "-")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _short(item_id: str) -> str:
    """First block of a uuid, enough to tell items apart on screen."""
    return item_id.split("-", 1)[0]


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tier.error")
    op = Text(f"  {result.op}", style="tier.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Board renderers ───────────────────────────────────────────────────


def _board_table(data: dict[str, Any], *, verbose: bool = False) -> Table:
    """One row per tier (label cell in the tier colour), then the bank."""
    table = Table(show_header=False, show_lines=True, pad_edge=False, expand=False)
    table.add_column("Tier", min_width=10, justify="center", no_wrap=True)
    table.add_column("Items")
    if verbose:
        table.add_column("ID", style="dim", no_wrap=True)

    def _items_cell(ids: list[str], empty: str) -> Text:
        if not ids:
            return Text(empty, style="tier.empty")
        return Text("  ".join(ids if verbose else [_short(i) for i in ids]))

    for tier in data.get("tiers", []):
        label = Text(str(tier.get("label", "")), style=style_for_color(str(tier.get("color"))))
        row: list[Any] = [label, _items_cell(tier.get("items", []), "Drop images here")]
        if verbose:
            row.append(str(tier.get("id", "")))
        table.add_row(*row)

    bank: list[Any] = [
        Text("Image Bank", style="tier.bank"),
        _items_cell(data.get("unranked", []), "Import images to get started!"),
    ]
    if verbose:
        bank.append("unranked")
    table.add_row(*bank)
    return table


def _render_board(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render show/reset/restore results as the tier board."""
    d = result.data
    if result.op != "show":
        _status_line(console, result)
        for key in ("restored_from", "cleared"):
            if key in d:
                _field(console, key, d[key])
    console.print(_board_table(d, verbose=verbose))
    console.print(f"\n{d.get('tier_count', 0)} tiers, {d.get('item_count', 0)} items")
    if verbose:
        _render_meta(console, result)


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render tier edits, save, and export results."""
    _status_line(console, result)
    mutation_keys = (
        "id",
        "label",
        "color",
        "index",
        "from_index",
        "to_index",
        "items_moved",
        "fields_changed",
        "order",
        "path",
        "tier_count",
        "item_count",
    )
    for key in mutation_keys:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_drag(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "action", d.get("action", "noop"))
    if not d.get("changed"):
        console.print(Text("  nothing moved", style="tier.empty"))
    for key in ("active_id", "over_id", "source_container", "dest_container"):
        if key in d:
            _field(console, key, d[key])
    if "from_index" in d and "to_index" in d:
        _field(console, "position", f"{d['from_index']} -> {d['to_index']}")
    if "order" in d:
        _field(console, "order", d["order"])
    if verbose:
        if "dest_items" in d:
            _field(console, "dest_items", d["dest_items"])
        _render_meta(console, result)


def _render_import(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="tier.id", no_wrap=True)
    table.add_column("Source")
    for entry in result.data.get("imported", []):
        table.add_row(str(entry.get("id", "")), str(entry.get("source", "")))
    console.print(table)
    console.print(
        f"\n{result.data.get('count', 0)} imported, "
        f"{result.data.get('unranked_count', 0)} in image bank"
    )
    if verbose:
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    issues = result.data.get("issues", [])
    if not issues:
        _status_line(console, result)
        console.print("  no issues found")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Severity")
    table.add_column("Category")
    table.add_column("ID", style="tier.id")
    table.add_column("Message")
    for issue in issues:
        sev = str(issue.get("severity", ""))
        style = "tier.error" if sev == "error" else "tier.warning"
        table.add_row(
            Text(sev, style=style),
            str(issue.get("category", "")),
            str(issue.get("id", "")),
            str(issue.get("message", "")),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(issues))} issues")
    if verbose:
        _render_meta(console, result)


def _render_palette(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Swatch")
    table.add_column("Colour")
    table.add_column("Used by")
    for entry in result.data.get("colors", []):
        color = str(entry.get("color", ""))
        table.add_row(
            Text("    ", style=style_for_color(color)),
            color,
            ", ".join(entry.get("tiers", [])) or "-",
        )
    console.print(table)


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    if "content" in result.data:
        console.print(str(result.data["content"]), markup=False, soft_wrap=True)
        return
    _render_mutation(result, console, verbose=verbose)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "show": _render_board,
    "reset": _render_board,
    "restore": _render_board,
    "add_tier": _render_mutation,
    "update_tier": _render_mutation,
    "delete_tier": _render_mutation,
    "move_tier": _render_mutation,
    "save": _render_mutation,
    "export": _render_export,
    "drag": _render_drag,
    "import_images": _render_import,
    "check": _render_check,
    "palette": _render_palette,
}

"""Rich terminal display for shield-maker."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _swatch(hex_color: str) -> str:
    """A two-cell block painted with ``hex_color``."""
    return f"[on {hex_color}]  [/]"


def print_badge_result(result: dict) -> None:
    """Print badge generation result."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{result.get('output', '')}[/]")
    lines.append(f"  {result.get('label', '')} | {result.get('message', '')}")
    lines.append(f"  Style: {result.get('style', 'flat')}  Size: {result.get('width', 0)}x{result.get('height', 0)}")
    lines.append("")
    lines.append("  Add to your README:")
    lines.append(f"  ![{result.get('label', 'badge')}]({result.get('filename', 'badge.svg')})")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=60,
    )
    console.print(panel)


def print_color_table(rows: list[dict]) -> None:
    """Print named colors and aliases with their resolved values.

    Each row: name, target (alias target or ""), hex, rgba, brightness, text.
    """
    table = Table(
        title="Badge Colors",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("", width=2)
    table.add_column("Name", style="bold")
    table.add_column("Alias Of")
    table.add_column("Hex")
    table.add_column("RGBA")
    table.add_column("Brightness", justify="right")
    table.add_column("Text", width=6)

    for row in rows:
        table.add_row(
            _swatch(row["hex"]),
            row["name"],
            row.get("target", ""),
            row["hex"],
            row["rgba"],
            f"{row['brightness']:.2f}",
            row["text"],
        )

    console.print(table)


def print_config(config: dict, path: str) -> None:
    """Print effective render defaults."""
    table = Table(
        title="Render Defaults",
        caption=path,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in config.items():
        table.add_row(key, "[dim]unset[/]" if value is None else str(value))
    console.print(table)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/] {message}")

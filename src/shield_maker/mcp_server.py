"""MCP server for shield-maker.

Exposes badge rendering as MCP tools so an assistant can produce README
badges mid-conversation.
Run via: python3 -m shield_maker.mcp_server
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from shield_maker.badge import describe_colors, render_badge
from shield_maker.config import get_defaults
from shield_maker.fonts import FontFamily, load_font_metrics

mcp = FastMCP(name="shield-maker")


@mcp.tool()
def render(
    label: str,
    message: str,
    style: str | None = None,
    color: str | None = None,
    label_color: str | None = None,
) -> dict[str, Any]:
    """Render a shields.io-style SVG badge.

    style is one of flat, flat-square, plastic. Colors accept shields.io names
    (brightgreen, red, ...), aliases (success, critical, ...) or CSS colors.
    """
    defaults = get_defaults()
    try:
        font = load_font_metrics(defaults["font_path"])
        svg = render_badge(
            label,
            message,
            font=font,
            style=style or defaults["style"],
            font_family=FontFamily.parse(defaults["font_family"]),
            label_color=label_color or defaults["label_color"],
            color=color or defaults["color"],
        )
    except (OSError, ValueError) as exc:
        return {"error": str(exc)}
    return {"svg": svg}


@mcp.tool()
def list_colors() -> dict[str, Any]:
    """List the named badge colors and their aliases."""
    rows = describe_colors()
    return {
        "colors": [r for r in rows if not r["target"]],
        "aliases": [r for r in rows if r["target"]],
    }


if __name__ == "__main__":
    mcp.run()

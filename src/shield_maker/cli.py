"""CLI commands for shield-maker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from shield_maker.badge import Metadata, Renderer, describe_colors
from shield_maker.config import CONFIG_KEYS, DEFAULT_CONFIG_PATH, get_defaults, set_default
from shield_maker.display import (
    console,
    print_badge_result,
    print_color_table,
    print_config,
    print_error,
)
from shield_maker.fonts import FontFamily, load_font_metrics
from shield_maker.logging_setup import configure_logging
from shield_maker.markup import render as render_document
from shield_maker.styles import Style

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shield-maker",
        description="Render shields.io-style SVG badges",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--config", default=None, help="Config file (default: ~/.shield-maker/config.json)")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render a badge to SVG")
    render_parser.add_argument("label", help="Left-hand text, may be empty")
    render_parser.add_argument("message", help="Right-hand text")
    render_parser.add_argument("--style", "-s", choices=[s.value for s in Style], default=None)
    render_parser.add_argument("--label-color", default=None, help="Named color, alias or CSS color")
    render_parser.add_argument("--color", "-c", default=None, help="Named color, alias or CSS color")
    render_parser.add_argument("--font", "-f", default=None, help="TrueType font used to measure text")
    render_parser.add_argument(
        "--font-family", choices=[f.name.lower().replace("_", "-") for f in FontFamily], default=None,
    )
    render_parser.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")

    subparsers.add_parser("colors", help="List named colors and aliases")

    config_parser = subparsers.add_parser("config", help="Show or change render defaults")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Show effective defaults")
    set_p = config_sub.add_parser("set", help="Set a default")
    set_p.add_argument("key", choices=CONFIG_KEYS)
    set_p.add_argument("value", nargs="?", default=None, help="Omit to unset")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    config_path = Path(args.config) if args.config else None

    if args.command is None:
        parser.print_help()
        return

    try:
        if args.command == "render":
            do_render(
                args.label,
                args.message,
                style=args.style,
                label_color=args.label_color,
                color=args.color,
                font=args.font,
                font_family=args.font_family,
                output=args.output,
                config_path=config_path,
            )
        elif args.command == "colors":
            do_colors()
        elif args.command == "config":
            if args.config_command == "set":
                do_config_set(args.key, args.value, config_path=config_path)
            else:
                do_config_show(config_path=config_path)
    except (OSError, ValueError) as exc:
        print_error(str(exc))
        sys.exit(1)


def do_render(
    label: str,
    message: str,
    style: str | None = None,
    label_color: str | None = None,
    color: str | None = None,
    font: str | None = None,
    font_family: str | None = None,
    output: str | None = None,
    config_path: Path | None = None,
) -> dict:
    """Render a badge, filling unset options from the config file.

    Writes the SVG to ``output`` when given, otherwise to stdout. Returns a
    dict describing the badge (useful for testing).
    """
    defaults = get_defaults(config_path)
    style_value = Style.parse(style or defaults["style"])
    metadata = Metadata(
        style=style_value,
        label=label,
        message=message,
        font=load_font_metrics(font or defaults["font_path"]),
        font_family=FontFamily.parse(font_family or defaults["font_family"]),
        label_color=label_color or defaults["label_color"],
        color=color or defaults["color"],
    )
    renderer = Renderer(metadata)
    svg = render_document(renderer.make_document())
    logger.debug("rendered %s badge %dx%s", style_value.value, renderer.width, renderer.height)

    result = {
        "ok": True,
        "label": label,
        "message": message,
        "style": style_value.value,
        "width": renderer.width,
        "height": int(renderer.height),
        "svg": svg,
    }
    if output is None:
        console.out(svg, highlight=False)
        return result

    output_path = Path(output)
    output_path.write_text(svg, encoding="utf-8")
    result["output"] = str(output_path.resolve())
    result["filename"] = output_path.name
    print_badge_result(result)
    return result


def do_colors() -> list[dict]:
    """Show the named color and alias tables."""
    rows = describe_colors()
    print_color_table(rows)
    return rows


def do_config_show(config_path: Path | None = None) -> dict:
    defaults = get_defaults(config_path)
    print_config(defaults, str(config_path or DEFAULT_CONFIG_PATH))
    return defaults


def do_config_set(key: str, value: str | None, config_path: Path | None = None) -> dict:
    """Persist one default after checking that it is usable."""
    if value is not None:
        if key == "style":
            value = Style.parse(value).value
        elif key == "font_family":
            FontFamily.parse(value)
        elif key == "font_path":
            load_font_metrics(value)
    set_default(key, value, config_path)
    return do_config_show(config_path)

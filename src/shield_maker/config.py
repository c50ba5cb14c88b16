"""Configuration file management for shield-maker.

Reads and writes ~/.shield-maker/config.json, which holds render defaults
(style, font file, colors) for the CLI and MCP server.
"""
from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_PATH: Path = Path.home() / ".shield-maker" / "config.json"

DEFAULTS: dict[str, str | None] = {
    "style": "flat",
    "font_path": None,
    "font_family": "default",
    "label_color": None,
    "color": None,
}
CONFIG_KEYS: tuple[str, ...] = tuple(DEFAULTS)


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_defaults(config_path: Path | None = None) -> dict[str, str | None]:
    """Built-in defaults overlaid with known string keys from the config file."""
    config = load_config(config_path)
    merged = dict(DEFAULTS)
    merged.update({
        k: v for k, v in config.items()
        if k in DEFAULTS and (isinstance(v, str) or (v is None and DEFAULTS[k] is None))
    })
    return merged


def set_default(key: str, value: str | None, config_path: Path | None = None) -> None:
    """Persist one default. Raises ValueError for unknown keys."""
    if key not in DEFAULTS:
        raise ValueError(
            f"Unknown config key {key!r}; expected one of: {', '.join(CONFIG_KEYS)}"
        )
    config = load_config(config_path)
    config[key] = value
    save_config(config, config_path)

"""Tests for the config module."""
import json

import pytest

from shield_maker.config import (
    DEFAULTS,
    get_defaults,
    load_config,
    save_config,
    set_default,
)


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == {}

    def test_invalid_json_returns_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        assert load_config(path) == {}

    def test_non_object_returns_empty(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_loads_valid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert load_config(path) == {"key": "value"}


class TestSaveConfig:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "config.json"
        save_config({"nested": True}, path)
        assert json.loads(path.read_text()) == {"nested": True}

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"v": 1}, path)
        save_config({"v": 2}, path)
        assert json.loads(path.read_text()) == {"v": 2}


class TestDefaults:
    def test_builtin_defaults_when_missing(self, tmp_path):
        assert get_defaults(tmp_path / "config.json") == DEFAULTS

    def test_file_values_override(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"style": "plastic", "unrelated": 1}, path)
        defaults = get_defaults(path)
        assert defaults["style"] == "plastic"
        assert "unrelated" not in defaults

    def test_non_string_values_are_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"style": 1, "color": ["red"], "font_family": None, "label_color": "blue"}, path)
        defaults = get_defaults(path)
        assert defaults["style"] == "flat"
        assert defaults["color"] is None
        assert defaults["font_family"] == "default"
        assert defaults["label_color"] == "blue"

    def test_set_and_get_roundtrip(self, tmp_path):
        path = tmp_path / "config.json"
        set_default("color", "informational", path)
        assert get_defaults(path)["color"] == "informational"

    def test_set_preserves_other_keys(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"other_key": "keep_me"}, path)
        set_default("style", "flat-square", path)
        config = load_config(path)
        assert config["other_key"] == "keep_me"
        assert config["style"] == "flat-square"

    def test_unknown_key_raises(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown config key"):
            set_default("logo", "github", tmp_path / "config.json")

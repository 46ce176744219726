"""Tests for config_loader."""

import json
import os

import pytest

import config_loader
from config_loader import ConfigError, load_config, resolve_options
from rendering.models import DEFAULT_CHUNK_SIZE


def _write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_default_is_empty(self):
        assert load_config() == {}

    def test_default_file_in_cwd(self, tmp_path):
        _write_config(tmp_path / "md2html.json", {"title": "From CWD"})
        assert load_config()["title"] == "From CWD"

    def test_explicit_missing_file(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("nope.json")

    def test_env_override_missing_file(self, monkeypatch):
        monkeypatch.setenv("MD2HTML_CONFIG", "elsewhere.json")
        with pytest.raises(ConfigError):
            load_config()

    def test_env_override(self, tmp_path, monkeypatch):
        config = _write_config(tmp_path / "custom.json", {"preview": True})
        monkeypatch.setenv("MD2HTML_CONFIG", str(config))
        assert load_config() == {"preview": True}

    def test_paths_resolve_relative_to_config(self, tmp_path):
        conf_dir = tmp_path / "conf"
        conf_dir.mkdir()
        config = _write_config(conf_dir / "settings.json", {"css_path": "theme.css"})
        loaded = load_config(str(config))
        assert loaded["css_path"] == os.path.join(str(conf_dir), "theme.css")

    def test_invalid_json(self, tmp_path):
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("bad.json")

    def test_non_object_root(self, tmp_path):
        _write_config(tmp_path / "list.json", ["css_path"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config("list.json")


class TestResolveOptions:
    def test_defaults(self):
        options = resolve_options()
        assert options.title is None
        assert options.css_path is None
        assert options.preview is False
        assert options.chunk_size == DEFAULT_CHUNK_SIZE
        assert options.show_progress is True

    def test_config_supplies_defaults(self, tmp_path):
        _write_config(
            tmp_path / "md2html.json",
            {"title": "Handbook", "preview": True, "chunk_size": 1024, "show_progress": False},
        )
        options = resolve_options()
        assert options.title == "Handbook"
        assert options.preview is True
        assert options.chunk_size == 1024
        assert options.show_progress is False

    def test_cli_values_win(self, tmp_path):
        _write_config(
            tmp_path / "md2html.json",
            {"title": "Handbook", "css_path": "a.css", "show_progress": False},
        )
        options = resolve_options(title="CLI", css_path="b.css", show_progress=True)
        assert options.title == "CLI"
        assert options.css_path == "b.css"
        assert options.show_progress is True

    @pytest.mark.parametrize("value", [0, -1, "big", True, 1.5])
    def test_invalid_chunk_size(self, tmp_path, value):
        _write_config(tmp_path / "md2html.json", {"chunk_size": value})
        with pytest.raises(ConfigError, match="chunk_size"):
            resolve_options()

    @pytest.mark.parametrize(
        "key, value",
        [
            ("title", 5),
            ("title", ["Handbook"]),
            ("css_path", 5),
            ("css_path", {"href": "a.css"}),
            ("preview", "false"),
            ("preview", 1),
            ("show_progress", "yes"),
            ("show_progress", None),
        ],
    )
    def test_invalid_option_types(self, tmp_path, key, value):
        _write_config(tmp_path / "md2html.json", {key: value})
        with pytest.raises(ConfigError, match=key):
            resolve_options()


class TestUnreadableConfig:
    def test_non_utf8_config(self, tmp_path):
        (tmp_path / "md2html.json").write_bytes(b'{"title": "\xff"}')
        with pytest.raises(ConfigError, match="UTF-8") as excinfo:
            load_config()
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_os_error_becomes_config_error(self, tmp_path, monkeypatch):
        _write_config(tmp_path / "md2html.json", {})

        def denied(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(config_loader, "open", denied, raising=False)
        with pytest.raises(ConfigError, match="Unable to read"):
            load_config()

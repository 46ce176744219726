"""Helpers for resolving configuration files and conversion defaults."""

import json
import os
from typing import Any, Dict, Optional

from rendering.models import DEFAULT_CHUNK_SIZE, ConversionOptions

DEFAULT_CONFIG_NAME = "md2html.json"
CONFIG_ENV_VAR = "MD2HTML_CONFIG"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no default exists.

    Explicit paths (argument or environment override) must exist.
    """
    env_override = os.environ.get(CONFIG_ENV_VAR)
    requested = path or env_override
    candidate = requested or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), os.path.dirname(os.path.abspath(__file__))]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if requested:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{config_path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith("_path"):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def _chunk_size(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(
            f"chunk_size must be a positive integer, got {value!r}"
        )
    return value


def _optional_str(config: Dict[str, Any], key: str) -> Optional[str]:
    value = config.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {value!r}")
    return value


def _flag(config: Dict[str, Any], key: str, default: bool) -> bool:
    value = config.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def resolve_options(
    config_path: Optional[str] = None,
    *,
    title: Optional[str] = None,
    css_path: Optional[str] = None,
    preview: bool = False,
    show_progress: Optional[bool] = None,
) -> ConversionOptions:
    """Combine CLI overrides with config values into ConversionOptions."""
    config = load_config(config_path)

    config_title = _optional_str(config, "title")
    config_css = _optional_str(config, "css_path")
    config_preview = _flag(config, "preview", False)
    config_progress = _flag(config, "show_progress", True)

    return ConversionOptions(
        title=title if title is not None else config_title,
        css_path=css_path if css_path is not None else config_css,
        preview=preview or config_preview,
        chunk_size=_chunk_size(config.get("chunk_size", DEFAULT_CHUNK_SIZE)),
        show_progress=(
            show_progress if show_progress is not None else config_progress
        ),
    )

"""CLI configuration helpers."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from nadeconv.core.types import TARGET_FORMATS

_DEFAULT_INDENT = 4
_DEFAULT_OUTPUTS: Dict[str, str] = {
    "mono": "mono.json",
    "primordial": "primordial",
    "kidua": "kidua.json",
}


def get_user_config_dir() -> Path:
    """Return the per-user config directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "nadeconv"
        return Path.home() / "nadeconv"
    return Path.home() / ".config" / "nadeconv"


def get_default_config_path() -> Path:
    """Return the config path, honouring NADECONV_CONFIG when set."""
    override = os.environ.get("NADECONV_CONFIG")
    if override:
        return Path(override)
    return get_user_config_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {"indent": _DEFAULT_INDENT, "outputs": dict(_DEFAULT_OUTPUTS)}


def _normalize_indent(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return _DEFAULT_INDENT
    return value


def _normalize_outputs(value: object) -> Dict[str, str]:
    outputs = dict(_DEFAULT_OUTPUTS)
    if not isinstance(value, dict):
        return outputs
    for target in TARGET_FORMATS:
        candidate = value.get(target)
        if isinstance(candidate, str) and candidate:
            outputs[target] = candidate
    return outputs


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return {
        "indent": _normalize_indent(raw.get("indent")),
        "outputs": _normalize_outputs(raw.get("outputs")),
    }

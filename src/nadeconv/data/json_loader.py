"""Low-level JSON helpers for reading lineup documents and writing outputs."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataWriteError


def _reject_constant(name: str) -> object:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json(text: str | bytes, source: str = "<document>") -> object:
    """Decode JSON text and raise DataLoadError on failure.

    NaN and Infinity are refused since none of the output schemas can carry them.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Document {source} is not valid UTF-8: {exc}") from exc
    except ValueError as exc:
        raise DataLoadError(f"Invalid JSON in {source}: {exc}") from exc


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Input file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Input file is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read input file: {path}") from exc
    return parse_json(text, str(path))


def dump_json(payload: object, indent: int = 4) -> str:
    """Pretty-print a payload the way every output file is written."""
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_json(path: Path, payload: object, indent: int = 4) -> None:
    """Write a payload to disk, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_json(payload, indent) + "\n", encoding="utf-8")
    except OSError as exc:
        raise DataWriteError(f"Unable to write output file: {path}") from exc

"""Helpers for resolving output file locations."""
from __future__ import annotations

from pathlib import Path

from .errors import DataWriteError

PRIMORDIAL_FILENAME = "nades.json"


def get_mono_path(output: Path | str) -> Path:
    """Return the single file that receives every map's mono lineups."""
    return Path(output)


def get_primordial_path(output: Path | str, map_name: str) -> Path:
    """Return the per-map primordial file, ``<output>/<map>/nades.json``.

    Map names come from the input document, so anything other than a single
    plain path component is refused.
    """
    if map_name in ("", ".", "..") or Path(map_name).name != map_name or "\\" in map_name:
        raise DataWriteError(f"Map name is not usable as a directory name: {map_name!r}")
    return Path(output) / map_name / PRIMORDIAL_FILENAME


def get_kidua_path(output: Path | str) -> Path:
    """Return the single file that receives the aggregated kidua lineups."""
    return Path(output)

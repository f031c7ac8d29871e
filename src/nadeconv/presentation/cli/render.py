"""Console rendering of read and conversion reports."""
from __future__ import annotations

import os
import sys
from typing import Mapping

from nadeconv.data.gs_reader import GrenadeCollection
from nadeconv.services.conversion_service import ConversionResult


def debug_enabled() -> bool:
    """Return True only when NADECONV_DEBUG is explicitly set to '1'."""
    return os.getenv("NADECONV_DEBUG") == "1"


def render_read_report(collection: GrenadeCollection) -> None:
    if debug_enabled():
        for rejected in collection.rejections:
            print(f"Error: {rejected.map_name}#{rejected.index}: {rejected.rejection.message}")
    for map_name, count in collection.counts.items():
        print(f"Map: {map_name}, nades: {count}")
    print(f"Nades read: {collection.total}")
    render_tally(collection.rejection_tally)


def render_conversion_report(result: ConversionResult) -> None:
    if debug_enabled():
        for failure in result.failures:
            print(f"Error converting to {result.target}: {failure.map_name}: {failure.message}")
    for map_name, count in result.counts.items():
        print(f"Wrote {count} nades for {map_name}")
    print(f"Wrote {result.total} total {result.target} nades")
    render_tally(result.rejections)


def render_tally(tally: Mapping[str, int]) -> None:
    """Print rejection reasons, most frequent first."""
    for reason, count in sorted(tally.items(), key=lambda item: (-item[1], item[0])):
        print(f"{reason}: {count}")


def render_error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)

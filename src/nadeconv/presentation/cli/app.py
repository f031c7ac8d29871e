"""Command-line entry point for converting gs lineups."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from nadeconv.core.types import TARGET_FORMATS, TargetFormat
from nadeconv.data import paths
from nadeconv.data.errors import DataError
from nadeconv.data.gs_reader import GrenadeCollection, read_gs_mapping
from nadeconv.data.json_loader import load_json, write_json
from nadeconv.presentation.cli.config import load_config
from nadeconv.presentation.cli.render import (
    render_conversion_report,
    render_error,
    render_read_report,
)
from nadeconv.services.conversion_service import ConversionResult, convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nadeconv",
        description="Convert gs-style grenade lineups into mono, primordial or kidua lineups.",
    )
    parser.add_argument("target", choices=TARGET_FORMATS, help="Output schema.")
    parser.add_argument("-i", "--input", required=True, type=Path, help="Input gs JSON file.")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (mono, kidua) or directory (primordial). Defaults come from the config.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file.")
    parser.add_argument("--indent", type=int, default=None, help="Indentation of written JSON.")
    return parser


def write_result(result: ConversionResult, output: Path, indent: int) -> list[Path]:
    """Persist a conversion result and return the files written."""
    if result.target == "primordial":
        written = []
        for map_name, nades in result.document.items():
            target_path = paths.get_primordial_path(output, map_name)
            write_json(target_path, nades, indent)
            written.append(target_path)
        return written
    if result.target == "mono":
        target_path = paths.get_mono_path(output)
    else:
        target_path = paths.get_kidua_path(output)
    write_json(target_path, result.document, indent)
    return [target_path]


def run(
    target: TargetFormat, input_path: Path, output: Path, *, indent: int = 4
) -> ConversionResult:
    """Read, convert and write one input file, printing the usual reports."""
    collection: GrenadeCollection = read_gs_mapping(load_json(input_path))
    render_read_report(collection)
    result = convert(collection, target)
    write_result(result, output, indent)
    render_conversion_report(result)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run a conversion; returns the process exit status."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    output = args.output or Path(config["outputs"][args.target])
    indent = args.indent if args.indent is not None and args.indent >= 0 else config["indent"]
    try:
        run(args.target, args.input, output, indent=indent)
    except DataError as exc:
        render_error(str(exc))
        return 1
    return 0

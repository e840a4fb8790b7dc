"""Command-line interface for ivigen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import TransformOptions, load_options
from .dom_model import parse_markup
from .io_utils import read_text, warn, write_text
from .transform import transform_nodes

VERSION = "0.0.1"


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ivigen",
        description="Convert an HTML fragment into a builder-chain component function.",
    )
    parser.add_argument("--file", "-f", type=Path, default=None, help="Input file (default: stdin)")
    parser.add_argument(
        "--trim",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop whitespace-only text nodes (default: on; --no-trim disables)",
    )
    parser.add_argument(
        "--component-name",
        dest="component_name",
        default=None,
        help="Name of the emitted function (default: Component)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with componentName/trim; command-line flags take precedence",
    )
    parser.add_argument("--out", "-o", type=Path, default=None, help="Write output to a file instead of stdout")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Transform twice and fail if the outputs differ.",
    )
    parser.add_argument("--version", "-v", action="version", version=f"ivigen {VERSION}")
    return parser.parse_args(argv)


def _resolve_input(path: Path) -> Path:
    if not path.is_absolute():
        path = Path.cwd() / path
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    return path


def _build_options(args: argparse.Namespace) -> TransformOptions:
    overrides = {"component_name": args.component_name, "trim": args.trim}
    try:
        if args.config is not None:
            if not args.config.exists():
                raise SystemExit(f"Config not found: {args.config}")
            return load_options(args.config, **overrides)
        return TransformOptions.model_validate(
            {key: value for key, value in overrides.items() if value is not None}
        )
    except ValidationError as exc:
        raise SystemExit(f"Invalid transform options: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    options = _build_options(args)

    if args.file is not None:
        markup = read_text(_resolve_input(args.file))
    else:
        markup = sys.stdin.read()

    nodes = parse_markup(markup)
    if not nodes:
        warn("[ivigen] no element found in input")
    elif len(nodes) > 1:
        warn(f"[ivigen] {len(nodes) - 1} sibling root element(s) after <{nodes[0].tag}> ignored")

    output = transform_nodes(nodes, options)
    if args.check and transform_nodes(parse_markup(markup), options) != output:
        raise SystemExit("Determinism check failed: outputs differ between runs")

    if args.out is not None:
        write_text(args.out, output)
        return
    sys.stdout.write(output)


if __name__ == "__main__":
    main()

"""Command that loads a polyhedron, prints it and draws it as SVG."""

from __future__ import annotations

import argparse
import sys
from fractions import Fraction
from pathlib import Path

from rupert.env import Env
from rupert.geom import Point3d, Quat
from rupert.json_rep import Polyhedron
from rupert.render import _format_number

DEFAULT_INPUT = "data/rational-snub.json"
DEFAULT_OUTPUT = "/tmp/a.svg"
DEFAULT_CIRCUIT = [0, 16, 3, 23, 5, 14, 6, 19, 9, 20, 2, 17]
DEFAULT_ROTATION = Quat(Fraction(10), Fraction(99, 10), Fraction(11, 20), Fraction(20, 10))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rupert", description="Print a polyhedron and draw its projection."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="polyhedron JSON file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="SVG file to write")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print(f"rupert: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1
    try:
        poly = Polyhedron.from_json(text)
    except ValueError as exc:
        print(f"rupert: JSON was not well-formatted: {exc}", file=sys.stderr)
        return 1

    print("JSON:")
    print("=========")
    print(poly.to_json())

    print("Vertices:")
    print("=========")
    for v in poly.vertices:
        print(
            f"{{x: {_format_number(v.x)}, y: {_format_number(v.y)}, z: {_format_number(v.z)}}}"
        )

    vertices = [Point3d(v.x, v.y, v.z) for v in poly.vertices]
    try:
        env = Env.build(vertices, poly.faces, DEFAULT_ROTATION, DEFAULT_CIRCUIT)
    except (IndexError, ValueError) as exc:
        print(f"rupert: invalid polyhedron: {exc}", file=sys.stderr)
        return 1

    try:
        Path(args.output).write_text(env.render())
    except OSError as exc:
        print(f"rupert: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
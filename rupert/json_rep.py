"""JSON representation of polyhedra with exact rational coordinates.

Rationals are stored as objects ``{"n": "<numerator>", "d": "<denominator>"}``
holding decimal integer strings; a polyhedron is ``{"v": [...], "f": [...]}``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any


def rational_from_wire(obj: Any) -> Fraction:
    """Decode a wire rational into a Fraction."""
    if not isinstance(obj, dict):
        raise ValueError(f"expected a rational object, got {obj!r}")
    try:
        numerator = obj["n"]
        denominator = obj["d"]
    except KeyError as exc:
        raise ValueError(f"rational is missing field {exc.args[0]!r}") from None
    if not isinstance(numerator, str) or not isinstance(denominator, str):
        raise ValueError("rational fields must be strings")
    try:
        n = int(numerator)
        d = int(denominator)
    except ValueError:
        raise ValueError(f"invalid integer in rational {obj!r}") from None
    if d == 0:
        raise ValueError("rational has a zero denominator")
    return Fraction(n, d)


def rational_to_wire(value: Any) -> dict[str, str]:
    """Encode a rational number in canonical form for the wire."""
    frac = Fraction(value)
    return {"n": str(frac.numerator), "d": str(frac.denominator)}


@dataclass
class Vertex:
    """A vertex of a polyhedron."""

    x: Fraction
    y: Fraction
    z: Fraction

    @classmethod
    def from_dict(cls, data: Any) -> Vertex:
        if not isinstance(data, dict):
            raise ValueError(f"expected a vertex object, got {data!r}")
        try:
            return cls(*(rational_from_wire(data[key]) for key in ("x", "y", "z")))
        except KeyError as exc:
            raise ValueError(f"vertex is missing field {exc.args[0]!r}") from None

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            "x": rational_to_wire(self.x),
            "y": rational_to_wire(self.y),
            "z": rational_to_wire(self.z),
        }


def _face_from_wire(face: Any) -> list[int]:
    if not isinstance(face, list):
        raise ValueError(f"expected a list of vertex indices, got {face!r}")
    for index in face:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError(f"invalid vertex index {index!r}")
    return list(face)


@dataclass
class Polyhedron:
    """A polyhedron: vertices and faces given as lists of vertex indices."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[list[int]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Polyhedron:
        if not isinstance(data, dict):
            raise ValueError("expected a polyhedron object")
        try:
            raw_vertices = data["v"]
            raw_faces = data["f"]
        except KeyError as exc:
            raise ValueError(f"polyhedron is missing field {exc.args[0]!r}") from None
        if not isinstance(raw_vertices, list) or not isinstance(raw_faces, list):
            raise ValueError("polyhedron fields must be lists")
        return cls(
            [Vertex.from_dict(v) for v in raw_vertices],
            [_face_from_wire(f) for f in raw_faces],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "v": [v.to_dict() for v in self.vertices],
            "f": [list(f) for f in self.faces],
        }

    @classmethod
    def from_json(cls, text: str) -> Polyhedron:
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
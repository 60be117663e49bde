"""SVG drawing of a projected polyhedron."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

from rupert.geom import Point3d
from rupert.render_geom import Point2d, Xform

if TYPE_CHECKING:
    from rupert.env import Env

_LABEL_SCALE = 1.075

_DEFAULT_XFORM = Xform(scale=200.0, translate=Point2d(500.0, 500.0))


def _format_number(value: Any) -> str:
    """Shortest decimal form of a float, without exponent or trailing ``.0``."""
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_line(p1: Point2d, p2: Point2d) -> str:
    """An SVG line between two points."""
    return (
        f'<line x1="{_format_number(p1.x)}" y1="{_format_number(p1.y)}" '
        f'x2="{_format_number(p2.x)}" y2="{_format_number(p2.y)}" '
        'style="stroke:black;stroke-width:1" />'
    )


def format_xf_line(xf: Xform, p1: Point2d, p2: Point2d) -> str:
    """An SVG line between two transformed points."""
    return format_line(xf.apply(p1), xf.apply(p2))


def format_xf_poly(xf: Xform, poly: Sequence[Point2d]) -> str:
    """The closed outline of a transformed polygon as SVG lines."""
    if not poly:
        return ""
    successors = list(poly[1:]) + [poly[0]]
    return "".join(format_xf_line(xf, p, q) for p, q in zip(poly, successors))


def render_faces(
    xf: Xform, proj_faces: Sequence[Sequence[Point2d]], face_indexes: Sequence[int]
) -> str:
    """Filled SVG polygons for the selected faces."""

    def polygon(face: Sequence[Point2d]) -> str:
        points = " ".join(
            f"{_format_number(q.x)},{_format_number(q.y)}" for q in map(xf.apply, face)
        )
        return f' <polygon points="{points}" style="fill:#04f;fill-opacity:0.4;" /> '

    return "\n".join(polygon(proj_faces[index]) for index in face_indexes)


def make_label(xf: Xform, i: int, v: Point3d) -> str:
    """A marker at a vertex plus a numbered label just outside it."""
    x = float(v.x)
    y = float(v.y)
    c = xf.apply(Point2d(x, y))
    d = xf.apply(Point2d(_LABEL_SCALE * x, _LABEL_SCALE * y))
    dx = _format_number(d.x)
    return (
        "\n"
        f'<circle cx="{_format_number(c.x)}" cy="{_format_number(c.y)}" r="4" fill="black"  />\n'
        f'<circle cx="{dx}" cy="{_format_number(d.y)}" r="9" fill="white"  />\n'
        '    <text font-family="iosevka" font-weight="bold" font-size="12" '
        'text-anchor="middle" dominant-baseline="middle" '
        f'x="{dx}" y="{_format_number(d.y + 1.0)}" >{i}</text>'
    )


def render(env: Env) -> str:
    """The whole SVG document for an environment."""
    xf = _DEFAULT_XFORM
    proj_faces = env.get_proj_faces()
    poly_strs = "\n".join(format_xf_poly(xf, face) for face in proj_faces)
    label_strs = "\n".join(make_label(xf, i, v) for i, v in enumerate(env.vertices))
    face_strs = render_faces(xf, proj_faces, env.positive_faces)
    return (
        '\n<svg height="1000" width="1000" xmlns="http://www.w3.org/2000/svg">\n'
        f"{face_strs}{poly_strs}{label_strs}\n"
        "</svg>\n"
    )
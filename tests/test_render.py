from fractions import Fraction

from rupert.env import Env
from rupert.geom import Point3d, Quat
from rupert.render import (
    format_line,
    format_xf_line,
    format_xf_poly,
    make_label,
    render,
    render_faces,
)
from rupert.render_geom import Point2d, Xform

IDENTITY_XF = Xform(1.0, Point2d(0.0, 0.0))
XF = Xform(200.0, Point2d(500.0, 500.0))


def _triangle_env():
    vertices = [
        Point3d(Fraction(0), Fraction(0), Fraction(0)),
        Point3d(Fraction(1), Fraction(0), Fraction(0)),
        Point3d(Fraction(0), Fraction(1), Fraction(0)),
    ]
    faces = [[0, 1, 2], [0, 2, 1]]
    return Env.build(vertices, faces, Quat(Fraction(1), 0, 0, 0), [0, 1, 2])


def test_format_line_integral_floats_have_no_fraction():
    text = format_line(Point2d(1.0, 2.0), Point2d(3.5, 4.0))
    assert text == '<line x1="1" y1="2" x2="3.5" y2="4" style="stroke:black;stroke-width:1" />'


def test_format_xf_line_applies_transform():
    text = format_xf_line(XF, Point2d(0.0, 0.0), Point2d(0.0, 0.0))
    assert text == format_line(Point2d(500.0, 500.0), Point2d(500.0, 500.0))


def test_format_xf_poly_closes_outline():
    poly = [Point2d(0.0, 0.0), Point2d(1.0, 0.0), Point2d(0.0, 1.0)]
    text = format_xf_poly(IDENTITY_XF, poly)
    assert text.count("<line") == 3
    assert text.endswith(format_line(poly[2], poly[0]))
    assert text.startswith(format_line(poly[0], poly[1]))


def test_format_xf_poly_empty():
    assert format_xf_poly(IDENTITY_XF, []) == ""


def test_render_faces_selects_faces_in_order():
    faces = [[Point2d(0.0, 0.0)], [Point2d(1.0, 2.0)]]
    text = render_faces(IDENTITY_XF, faces, [1, 0])
    parts = text.split("\n")
    assert len(parts) == 2
    assert 'points="1,2"' in parts[0]
    assert 'points="0,0"' in parts[1]
    assert parts[0].startswith(" <polygon") and parts[0].endswith("/> ")


def test_make_label_contains_index_and_centre():
    text = make_label(XF, 7, Point3d(Fraction(0), Fraction(0), Fraction(0)))
    assert '<circle cx="500" cy="500" r="4" fill="black"  />' in text
    assert text.endswith(">7</text>")
    assert 'y="501"' in text


def test_render_document_structure():
    env = _triangle_env()
    svg = render(env)
    assert svg.startswith('\n<svg height="1000" width="1000"')
    assert svg.endswith("\n</svg>\n")
    assert svg.count("<polygon") == len(env.positive_faces)
    assert svg.count("<text") == len(env.vertices)
    assert svg.count("<line") == sum(len(f) for f in env.faces)
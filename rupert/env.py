"""The search environment: a rotated polyhedron and its chosen patch."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Sequence

from rupert import render as _render
from rupert.geom import Point3d, Quat, rotate_vertices
from rupert.interval import is_maybe_positive
from rupert.render_geom import Point2d


def is_positive_face(face_vs: Sequence[Point3d]) -> bool:
    """True if an oriented face could face the positive z direction.

    Only the first three vertices are used; they are assumed coplanar
    with the rest. With interval coordinates the answer is whether some
    choice within the intervals makes the face positive.
    """
    if len(face_vs) < 3:
        raise ValueError("a face needs at least three vertices")
    v0, v1, v2 = face_vs[0], face_vs[1], face_vs[2]
    return is_maybe_positive((v1 - v0).cross(v2 - v0).z)


def get_positive_faces(
    vertices: Sequence[Point3d], faces: Iterable[Sequence[int]]
) -> list[int]:
    """Indices of the faces in positive orientation."""
    return [
        i
        for i, face in enumerate(faces)
        if is_positive_face([vertices[index] for index in face])
    ]


def proj_vertex(v: Point3d) -> Point2d:
    """Project a vertex to 2d by dropping its z coordinate."""
    return Point2d(float(v.x), float(v.y))


@dataclass
class Env:
    """What the search needs to know that does not vary between hypercubes.

    ``positive_faces`` lists the faces that must stay positively oriented
    for a rotation to lie in the chosen patch; ``circuit`` is the cyclic
    list of vertices supporting the convex hull under projection.
    """

    vertices: list[Point3d[Fraction]] = field(default_factory=list)
    faces: list[list[int]] = field(default_factory=list)
    positive_faces: list[int] = field(default_factory=list)
    circuit: list[int] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        vertices: Iterable[Point3d],
        faces: Iterable[Sequence[int]],
        rotation: Quat,
        circuit: Iterable[int],
    ) -> Env:
        """Bake a rotation into the vertices and find the positive faces."""
        rotated = rotate_vertices(rotation, vertices)
        face_list = [list(face) for face in faces]
        return cls(
            vertices=rotated,
            faces=face_list,
            positive_faces=get_positive_faces(rotated, face_list),
            circuit=list(circuit),
        )

    def render(self) -> str:
        """The SVG drawing of this environment."""
        return _render.render(self)

    def get_proj_faces(self) -> list[list[Point2d]]:
        """Every face with its vertices projected to 2d."""
        return [[proj_vertex(self.vertices[i]) for i in face] for face in self.faces]
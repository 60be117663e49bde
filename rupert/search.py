"""Patch membership tests over interval-valued rotations."""

from __future__ import annotations

from dataclasses import dataclass

from rupert.env import Env, is_positive_face
from rupert.geom import Point3d, Quat, rotate_vertices
from rupert.interval import Interval


@dataclass
class State:
    """A 7-dimensional hypercube in parameter space."""

    outer: Point3d
    inner: Point3d
    translate: Interval


def quat_in_in_patch(env: Env, quat: Quat) -> bool:
    """Whether an interval rotation can keep the environment in its patch.

    Returns False as soon as some face could become positive that is not
    one of the environment's positive faces.
    """
    exact_vertices = [
        Point3d(Interval.exact(v.x), Interval.exact(v.y), Interval.exact(v.z))
        for v in env.vertices
    ]
    rotated = rotate_vertices(quat, exact_vertices)
    allowed = set(env.positive_faces)
    return all(
        i in allowed
        for i, face in enumerate(env.faces)
        if is_positive_face([rotated[index] for index in face])
    )
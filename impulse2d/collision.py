"""Narrow-phase collision detection between pairs of bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .body import Body
from .shapes import ShapeType
from .vecmath import EPSILON, Vec2, bias_greater_than, dist_sqr, dot


@dataclass
class ContactResult:
    """Contact information produced by a collision test."""

    normal: Vec2 = Vec2(0.0, 0.0)
    penetration: float = 0.0
    contacts: list[Vec2] = field(default_factory=list)

    @property
    def contact_count(self) -> int:
        return len(self.contacts)


def circle_to_circle(a: Body, b: Body) -> ContactResult:
    """Contact between two circle bodies; the normal points from ``a`` to ``b``."""
    radius_a = a.shape.radius
    normal = b.position - a.position
    distance_sqr = normal.length_sqr()
    radius = radius_a + b.shape.radius

    if distance_sqr >= radius * radius:
        return ContactResult()

    distance = math.sqrt(distance_sqr)
    if distance == 0.0:
        return ContactResult(Vec2(1.0, 0.0), radius_a, [a.position])

    unit = normal / distance
    return ContactResult(unit, radius - distance, [unit * radius_a + a.position])


def circle_to_polygon(a: Body, b: Body) -> ContactResult:
    """Contact between circle body ``a`` and polygon body ``b``."""
    radius = a.shape.radius
    poly = b.shape
    vertices = poly.vertices
    normals = poly.normals
    u = poly.u

    center = u.transpose() @ (a.position - b.position)

    separation = -math.inf
    face_normal = 0
    for i, (n, v) in enumerate(zip(normals, vertices)):
        s = dot(n, center - v)
        if s > radius:
            return ContactResult()
        if s > separation:
            separation = s
            face_normal = i

    v1 = vertices[face_normal]
    v2 = vertices[(face_normal + 1) % len(vertices)]

    if separation < EPSILON:
        normal = -(u @ normals[face_normal])
        return ContactResult(normal, radius, [normal * radius + a.position])

    dot1 = dot(center - v1, v2 - v1)
    dot2 = dot(center - v2, v1 - v2)
    penetration = radius - separation

    if dot1 <= 0.0:
        if dist_sqr(center, v1) > radius * radius:
            return ContactResult()
        normal = (u @ (v1 - center)).normalized()
        return ContactResult(normal, penetration, [u @ v1 + b.position])

    if dot2 <= 0.0:
        if dist_sqr(center, v2) > radius * radius:
            return ContactResult()
        normal = (u @ (v2 - center)).normalized()
        return ContactResult(normal, penetration, [u @ v2 + b.position])

    n = normals[face_normal]
    if dot(center - v1, n) > radius:
        return ContactResult()
    normal = -(u @ n)
    return ContactResult(normal, penetration, [normal * radius + a.position])


def polygon_to_circle(a: Body, b: Body) -> ContactResult:
    """Contact between polygon body ``a`` and circle body ``b``."""
    result = circle_to_polygon(b, a)
    result.normal = -result.normal
    return result


def find_axis_least_penetration(a: Body, b: Body) -> tuple[int, float]:
    """Face of ``a`` with the greatest separation from ``b``, and that separation."""
    pa = a.shape
    pb = b.shape
    bu_t = pb.u.transpose()

    best_distance = -math.inf
    best_index = 0
    for i, (normal, vertex) in enumerate(zip(pa.normals, pa.vertices)):
        n = bu_t @ (pa.u @ normal)
        support = pb.get_support(-n)
        v = bu_t @ (pa.u @ vertex + a.position - b.position)
        d = dot(n, support - v)
        if d > best_distance:
            best_distance = d
            best_index = i
    return best_index, best_distance


def find_incident_face(
    ref_body: Body, inc_body: Body, reference_index: int
) -> tuple[Vec2, Vec2]:
    """World-space endpoints of the incident polygon's most anti-parallel face."""
    ref = ref_body.shape
    inc = inc_body.shape

    reference_normal = inc.u.transpose() @ (ref.u @ ref.normals[reference_index])

    incident_face = 0
    min_dot = math.inf
    for i, n in enumerate(inc.normals):
        d = dot(reference_normal, n)
        if d < min_dot:
            min_dot = d
            incident_face = i

    count = len(inc.vertices)
    first = inc.u @ inc.vertices[incident_face] + inc_body.position
    second = inc.u @ inc.vertices[(incident_face + 1) % count] + inc_body.position
    return first, second


def clip(n: Vec2, c: float, face: Sequence[Vec2]) -> tuple[int, tuple[Vec2, Vec2]]:
    """Clip a two-point face against the plane ``dot(n, p) = c``.

    Returns the number of points kept and the updated face.
    """
    f0, f1 = face
    out = [f0, f1]
    kept = 0

    d1 = dot(n, f0) - c
    d2 = dot(n, f1) - c

    if d1 <= 0.0:
        out[kept] = f0
        kept += 1
    if d2 <= 0.0:
        out[kept] = f1
        kept += 1

    if d1 * d2 < 0.0:
        alpha = d1 / (d1 - d2)
        out[kept] = f0 + alpha * (f1 - f0)
        kept += 1

    return kept, (out[0], out[1])


def polygon_to_polygon(a: Body, b: Body) -> ContactResult:
    """Contact between two polygon bodies; the normal points from ``a`` to ``b``."""
    face_a, penetration_a = find_axis_least_penetration(a, b)
    if penetration_a >= 0.0:
        return ContactResult()

    face_b, penetration_b = find_axis_least_penetration(b, a)
    if penetration_b >= 0.0:
        return ContactResult()

    if bias_greater_than(penetration_a, penetration_b):
        ref_body, inc_body, reference_index, flip = a, b, face_a, False
    else:
        ref_body, inc_body, reference_index, flip = b, a, face_b, True

    incident_face = find_incident_face(ref_body, inc_body, reference_index)

    ref = ref_body.shape
    count = len(ref.vertices)
    v1 = ref.u @ ref.vertices[reference_index] + ref_body.position
    v2 = ref.u @ ref.vertices[(reference_index + 1) % count] + ref_body.position

    side_plane_normal = (v2 - v1).normalized()
    ref_face_normal = Vec2(side_plane_normal.y, -side_plane_normal.x)

    ref_c = dot(ref_face_normal, v1)
    neg_side = -dot(side_plane_normal, v1)
    pos_side = dot(side_plane_normal, v2)

    kept, incident_face = clip(-side_plane_normal, neg_side, incident_face)
    if kept < 2:
        return ContactResult()
    kept, incident_face = clip(side_plane_normal, pos_side, incident_face)
    if kept < 2:
        return ContactResult()

    normal = -ref_face_normal if flip else ref_face_normal

    contacts: list[Vec2] = []
    penetration = 0.0
    for point in incident_face:
        separation = dot(ref_face_normal, point) - ref_c
        if separation <= 0.0:
            contacts.append(point)
            penetration += -separation
    if contacts:
        penetration /= len(contacts)

    return ContactResult(normal, penetration, contacts)


_DISPATCH: dict[tuple[ShapeType, ShapeType], Callable[[Body, Body], ContactResult]] = {
    (ShapeType.CIRCLE, ShapeType.CIRCLE): circle_to_circle,
    (ShapeType.CIRCLE, ShapeType.POLY): circle_to_polygon,
    (ShapeType.POLY, ShapeType.CIRCLE): polygon_to_circle,
    (ShapeType.POLY, ShapeType.POLY): polygon_to_polygon,
}


def collide(a: Body, b: Body) -> ContactResult:
    """Run the collision routine matching the shape types of ``a`` and ``b``."""
    return _DISPATCH[(a.shape.shape_type, b.shape.shape_type)](a, b)
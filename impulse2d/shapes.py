"""Collision shapes: circles and convex polygons."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .vecmath import EPSILON, PI, Mat2, Vec2, cross, dot

MAX_POLY_VERTEX_COUNT = 64


class ShapeType(enum.IntEnum):
    """Kinds of shape, used to pick a collision routine."""

    CIRCLE = 0
    POLY = 1


@dataclass(frozen=True)
class MassData:
    """Mass properties computed from a shape and a density."""

    mass: float
    inv_mass: float
    inertia: float
    inv_inertia: float

    @classmethod
    def of(cls, mass: float, inertia: float) -> MassData:
        return cls(
            mass=mass,
            inv_mass=1.0 / mass if mass else 0.0,
            inertia=inertia,
            inv_inertia=1.0 / inertia if inertia else 0.0,
        )


class Shape(ABC):
    """Base class for shapes attached to a body."""

    shape_type: ShapeType

    def __init__(self) -> None:
        self.u = Mat2()

    @abstractmethod
    def clone(self) -> Shape:
        """Independent copy of this shape."""

    @abstractmethod
    def compute_mass(self, density: float) -> MassData:
        """Mass properties of the shape for the given density."""

    def set_orient(self, radians: float) -> None:
        """Set the model-to-world orientation."""
        self.u = Mat2.from_angle(radians)


class Circle(Shape):
    """A circle centred on its body's position."""

    shape_type = ShapeType.CIRCLE

    def __init__(self, radius: float) -> None:
        super().__init__()
        self.radius = radius

    def clone(self) -> Circle:
        copy = Circle(self.radius)
        copy.u = self.u
        return copy

    def compute_mass(self, density: float) -> MassData:
        mass = PI * self.radius * self.radius * density
        return MassData.of(mass, mass * self.radius * self.radius)

    def set_orient(self, radians: float) -> None:
        self.u = Mat2.from_angle(radians)

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius!r})"


class PolygonShape(Shape):
    """A convex polygon in model space with outward face normals."""

    shape_type = ShapeType.POLY

    def __init__(self, vertices: Iterable[Vec2] | None = None) -> None:
        super().__init__()
        self.vertices: list[Vec2] = []
        self.normals: list[Vec2] = []
        if vertices is not None:
            self.set(vertices)

    def clone(self) -> PolygonShape:
        copy = PolygonShape()
        copy.u = self.u
        copy.vertices = list(self.vertices)
        copy.normals = list(self.normals)
        return copy

    def compute_mass(self, density: float) -> MassData:
        """Compute mass properties and move the centroid to the origin."""
        centroid = Vec2(0.0, 0.0)
        area = 0.0
        inertia = 0.0
        k_inv3 = 1.0 / 3.0

        for p1, p2 in zip(self.vertices, self.vertices[1:] + self.vertices[:1]):
            d = cross(p1, p2)
            triangle_area = 0.5 * d
            area += triangle_area
            centroid += triangle_area * k_inv3 * (p1 + p2)
            intx2 = p1.x * p1.x + p2.x * p1.x + p2.x * p2.x
            inty2 = p1.y * p1.y + p2.y * p1.y + p2.y * p2.y
            inertia += (0.25 * k_inv3 * d) * (intx2 + inty2)

        if area == 0.0:
            raise ValueError("polygon has no area")

        centroid = centroid * (1.0 / area)
        self.vertices = [v - centroid for v in self.vertices]
        return MassData.of(density * area, inertia * density)

    def set_orient(self, radians: float) -> None:
        self.u = Mat2.from_angle(radians)

    def set_box(self, hw: float, hh: float) -> None:
        """Make this an axis-aligned box of half width ``hw`` and half height ``hh``."""
        self.vertices = [
            Vec2(-hw, -hh),
            Vec2(hw, -hh),
            Vec2(hw, hh),
            Vec2(-hw, hh),
        ]
        self.normals = [
            Vec2(0.0, -1.0),
            Vec2(1.0, 0.0),
            Vec2(0.0, 1.0),
            Vec2(-1.0, 0.0),
        ]

    def set(self, vertices: Iterable[Vec2]) -> None:
        """Set the polygon to the convex hull of ``vertices``."""
        points = list(vertices)
        count = len(points)
        if not 2 < count <= MAX_POLY_VERTEX_COUNT:
            raise ValueError(
                f"polygon needs between 3 and {MAX_POLY_VERTEX_COUNT} vertices, got {count}"
            )

        right_most = 0
        highest_x = points[0].x
        for i, p in enumerate(points[1:], start=1):
            if p.x > highest_x:
                highest_x = p.x
                right_most = i
            elif p.x == highest_x and p.y < points[right_most].y:
                right_most = i

        hull: list[int] = []
        index_hull = right_most
        while True:
            hull.append(index_hull)
            if len(hull) > count:
                raise ValueError("could not build a hull from these vertices")

            next_index = 0
            for i in range(1, count):
                if next_index == index_hull:
                    next_index = i
                    continue
                e1 = points[next_index] - points[index_hull]
                e2 = points[i] - points[index_hull]
                c = cross(e1, e2)
                if c < 0.0:
                    next_index = i
                if c == 0.0 and e2.length_sqr() > e1.length_sqr():
                    next_index = i

            index_hull = next_index
            if next_index == right_most:
                break

        hull_vertices = [points[i] for i in hull]
        normals = []
        for v1, v2 in zip(hull_vertices, hull_vertices[1:] + hull_vertices[:1]):
            face = v2 - v1
            if face.length_sqr() <= EPSILON * EPSILON:
                raise ValueError("polygon has a zero-length edge")
            normals.append(Vec2(face.y, -face.x).normalized())

        self.vertices = hull_vertices
        self.normals = normals

    def get_support(self, direction: Vec2) -> Vec2:
        """The vertex farthest along ``direction``."""
        if not self.vertices:
            raise ValueError("polygon has no vertices")
        return max(self.vertices, key=lambda v: dot(v, direction))

    def __repr__(self) -> str:
        return f"PolygonShape(vertices={self.vertices!r})"
"""Rigid bodies: a shape with position, velocity and mass."""

from __future__ import annotations

import random

from .shapes import Shape
from .vecmath import PI, Vec2, cross, random_range


class Body:
    """A rigid body owning its own copy of a shape."""

    def __init__(
        self,
        shape: Shape,
        x: float,
        y: float,
        rng: random.Random | None = None,
    ) -> None:
        self.shape = shape.clone()
        self.position = Vec2(float(x), float(y))
        self.velocity = Vec2(0.0, 0.0)
        self.angular_velocity = 0.0
        self.torque = 0.0
        self.orient = random_range(-PI, PI, rng)
        self.force = Vec2(0.0, 0.0)
        self.static_friction = 0.5
        self.dynamic_friction = 0.3
        self.restitution = 0.2

        data = self.shape.compute_mass(1.0)
        self.mass = data.mass
        self.inv_mass = data.inv_mass
        self.inertia = data.inertia
        self.inv_inertia = data.inv_inertia

        self.color = (
            random_range(0.2, 1.0, rng),
            random_range(0.2, 1.0, rng),
            random_range(0.2, 1.0, rng),
        )

    def apply_force(self, f: Vec2) -> None:
        """Accumulate a force for the next step."""
        self.force += f

    def apply_impulse(self, impulse: Vec2, contact_vector: Vec2) -> None:
        """Apply an impulse at ``contact_vector`` relative to the centre of mass."""
        self.velocity += self.inv_mass * impulse
        self.angular_velocity += self.inv_inertia * cross(contact_vector, impulse)

    def set_static(self) -> None:
        """Give the body infinite mass and inertia."""
        self.inertia = 0.0
        self.inv_inertia = 0.0
        self.mass = 0.0
        self.inv_mass = 0.0

    def set_orient(self, radians: float) -> None:
        """Set the orientation of the body and its shape."""
        self.orient = radians
        self.shape.set_orient(radians)

    def __repr__(self) -> str:
        return f"Body(shape={self.shape!r}, position={self.position!r})"
"""A physics scene that steps a set of bodies forward in time."""

from __future__ import annotations

import random

from .body import Body
from .manifold import Manifold
from .shapes import Shape
from .vecmath import DT, GRAVITY, Vec2


def integrate_forces(body: Body, dt: float) -> None:
    """Apply half a step of accumulated force, torque and gravity to ``body``."""
    if body.inv_mass == 0.0:
        return
    half = dt / 2.0
    body.velocity += (body.force * body.inv_mass + GRAVITY) * half
    body.angular_velocity += body.torque * body.inv_inertia * half


def integrate_velocity(body: Body, dt: float) -> None:
    """Move ``body`` by its velocity, then apply the second half of its forces."""
    if body.inv_mass == 0.0:
        return
    body.position += body.velocity * dt
    body.orient += body.angular_velocity * dt
    body.set_orient(body.orient)
    integrate_forces(body, dt)


class Scene:
    """A collection of bodies and the contacts found between them."""

    def __init__(
        self,
        dt: float = DT,
        iterations: int = 10,
        rng: random.Random | None = None,
    ) -> None:
        self.dt = dt
        self.iterations = iterations
        self.rng = rng
        self.bodies: list[Body] = []
        self.contacts: list[Manifold] = []

    def _find_contacts(self) -> list[Manifold]:
        found = []
        for i, a in enumerate(self.bodies):
            for b in self.bodies[i + 1 :]:
                if a.inv_mass == 0 and b.inv_mass == 0:
                    continue
                manifold = Manifold(a, b)
                manifold.solve()
                if manifold.contact_count:
                    found.append(manifold)
        return found

    def step(self) -> None:
        """Advance the simulation by one time step."""
        self.contacts = self._find_contacts()

        for body in self.bodies:
            integrate_forces(body, self.dt)

        for manifold in self.contacts:
            manifold.initialize()

        for _ in range(self.iterations):
            for manifold in self.contacts:
                manifold.apply_impulse()

        for body in self.bodies:
            integrate_velocity(body, self.dt)

        for manifold in self.contacts:
            manifold.positional_correction()

        for body in self.bodies:
            body.force = Vec2(0.0, 0.0)
            body.torque = 0.0

    def add(self, shape: Shape, x: float, y: float) -> Body:
        """Create a body from a copy of ``shape`` at (x, y) and add it."""
        if shape is None:
            raise ValueError("a body needs a shape")
        body = Body(shape, x, y, self.rng)
        self.bodies.append(body)
        return body

    def clear(self) -> None:
        """Remove every body and contact."""
        self.bodies.clear()
        self.contacts.clear()

    def __repr__(self) -> str:
        return (
            f"Scene(dt={self.dt!r}, iterations={self.iterations!r}, "
            f"bodies={len(self.bodies)})"
        )
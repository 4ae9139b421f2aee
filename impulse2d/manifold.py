"""Contact manifolds and impulse-based collision resolution."""

from __future__ import annotations

import math

from .body import Body
from .collision import collide
from .vecmath import DT, EPSILON, GRAVITY, Vec2, cross, dot, equal, sqr


class Manifold:
    """Contact data for a pair of bodies and the solver acting on it."""

    def __init__(self, a: Body, b: Body) -> None:
        self.a = a
        self.b = b
        self.penetration = 0.0
        self.normal = Vec2(0.0, 0.0)
        self.contacts: list[Vec2] = []
        self.e = 0.0
        self.df = 0.0
        self.sf = 0.0

    @property
    def contact_count(self) -> int:
        return len(self.contacts)

    def solve(self) -> None:
        """Generate contact information for the pair."""
        result = collide(self.a, self.b)
        self.normal = result.normal
        self.penetration = result.penetration
        self.contacts = list(result.contacts)

    def _relative_velocity(self, ra: Vec2, rb: Vec2) -> Vec2:
        a, b = self.a, self.b
        return (
            b.velocity
            + cross(b.angular_velocity, rb)
            - a.velocity
            - cross(a.angular_velocity, ra)
        )

    def initialize(self) -> None:
        """Mix material properties and detect resting contacts."""
        a, b = self.a, self.b
        self.e = min(a.restitution, b.restitution)
        self.sf = math.sqrt(a.static_friction * a.static_friction)
        self.df = math.sqrt(a.dynamic_friction * a.dynamic_friction)

        resting = (DT * GRAVITY).length_sqr() + EPSILON
        for contact in self.contacts:
            rv = self._relative_velocity(contact - a.position, contact - b.position)
            if rv.length_sqr() < resting:
                self.e = 0.0

    def apply_impulse(self) -> None:
        """Apply normal and friction impulses at each contact."""
        a, b = self.a, self.b
        if equal(a.inv_mass + b.inv_mass, 0.0):
            self.infinite_mass_correction()
            return

        count = float(self.contact_count)
        for contact in self.contacts:
            ra = contact - a.position
            rb = contact - b.position

            rv = self._relative_velocity(ra, rb)
            contact_vel = dot(rv, self.normal)
            if contact_vel > 0:
                return

            ra_cross_n = cross(ra, self.normal)
            rb_cross_n = cross(rb, self.normal)
            inv_mass_sum = (
                a.inv_mass
                + b.inv_mass
                + sqr(ra_cross_n) * a.inv_inertia
                + sqr(rb_cross_n) * b.inv_inertia
            )

            j = -(1.0 + self.e) * contact_vel
            j /= inv_mass_sum
            j /= count

            impulse = self.normal * j
            a.apply_impulse(-impulse, ra)
            b.apply_impulse(impulse, rb)

            rv = self._relative_velocity(ra, rb)
            t = (rv - self.normal * dot(rv, self.normal)).normalized()

            jt = -dot(rv, t)
            jt /= inv_mass_sum
            jt /= count

            if equal(jt, 0.0):
                return

            if abs(jt) < j * self.sf:
                tangent_impulse = t * jt
            else:
                tangent_impulse = t * -j * self.df

            a.apply_impulse(-tangent_impulse, ra)
            b.apply_impulse(tangent_impulse, rb)

    def positional_correction(self) -> None:
        """Push the bodies apart to undo part of the penetration."""
        k_slop = 0.05
        percent = 0.4
        a, b = self.a, self.b
        amount = max(self.penetration - k_slop, 0.0) / (a.inv_mass + b.inv_mass)
        correction = amount * self.normal * percent
        a.position -= correction * a.inv_mass
        b.position += correction * b.inv_mass

    def infinite_mass_correction(self) -> None:
        """Stop both bodies."""
        self.a.velocity = Vec2(0.0, 0.0)
        self.b.velocity = Vec2(0.0, 0.0)

    def __repr__(self) -> str:
        return (
            f"Manifold(a={self.a!r}, b={self.b!r}, normal={self.normal!r}, "
            f"penetration={self.penetration!r}, contacts={self.contacts!r})"
        )
# impulse2d

A compact 2D rigid body physics engine built on impulse resolution. It
simulates circles and convex polygons under gravity. It finds contacts
between them and resolves collisions with restitution, static and
dynamic friction, and positional correction.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `impulse2d.vecmath`: immutable `Vec2` and `Mat2`, with matrix-vector
  products written as `m @ v`. Helpers include `dot`, `cross`, `dist_sqr`,
  `vmin`, `vmax`, `clamp`, `equal`, `sqr`, `round_half`, `random_range`
  and `bias_greater_than`. It also defines the constants `PI`, `EPSILON`,
  `GRAVITY` and `DT`.
- `impulse2d.shapes`: `Circle` and `PolygonShape`. Use
  `PolygonShape.set_box(hw, hh)` for boxes and `PolygonShape.set(vertices)`
  for any point set. `set` builds the convex hull of the points and raises
  `ValueError` unless there are 3 to 64 points. `compute_mass(density)`
  returns a `MassData`.
- `impulse2d.body`: `Body`, which holds position, velocity, orientation,
  mass data and material properties. A body's starting orientation and
  colour are random. Pass a `random.Random` as `rng` to make them
  reproducible. `set_static()` gives the body infinite mass.
- `impulse2d.collision`: contact generation for every pair of shape
  types, chosen by `collide(a, b)`. It returns a `ContactResult`.
- `impulse2d.manifold`: `Manifold`, which solves the contact for a pair of
  bodies. It then applies impulses and positional correction.
- `impulse2d.scene`: `Scene`, which owns the bodies and moves the
  simulation forward one fixed time step at a time. It also has
  `integrate_forces` and `integrate_velocity`.
- `impulse2d.clock`: `Clock`, a stopwatch that reports nanoseconds. By
  default it uses `time.perf_counter_ns`, and you can give it another timer.

## Example

This sets up a static circle and a static floor, then drops a falling
circle on top of them:

```python
import random

from impulse2d.scene import Scene
from impulse2d.shapes import Circle, PolygonShape

scene = Scene(1.0 / 60.0, 10, rng=random.Random(1))

anchor = scene.add(Circle(5.0), 40, 40)
anchor.set_static()

floor_shape = PolygonShape()
floor_shape.set_box(30.0, 1.0)
floor = scene.add(floor_shape, 40, 55)
floor.set_static()
floor.set_orient(0.0)

ball = scene.add(Circle(2.0), 42, 10)

for _ in range(240):
    scene.step()

print(ball.position)
```

Coordinates follow screen convention, so gravity points along positive y.
Each call to `step` does the following, in order:

1. Generates contacts.
2. Integrates forces.
3. Applies impulses over the configured number of iterations.
4. Integrates velocities.
5. Corrects penetration.
6. Clears the accumulated forces and torques.

## What it does not do

impulse2d is a library only. It does not open a window, draw bodies or
contacts, or read mouse and keyboard input, and it installs no command.
To drive a real-time loop, call `Scene.step` from your own code. You can
use `Clock` to work out how many fixed steps to run.
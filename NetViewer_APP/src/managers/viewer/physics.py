"""
Thin helpers over the pymunk physics engine.

Particles are shapeless pymunk bodies with infinite moment (they never
rotate); springs are pymunk DampedSprings anchored at the body centres.
A fixed particle is a kinematic body with zero velocity, which springs and
forces cannot move but which code can reposition freely.
"""

import math
import pymunk


def make_particle(space: pymunk.Space, mass: float, x: float, y: float) -> pymunk.Body:
    """Create a dynamic particle at (x, y) and add it to the space."""
    body = pymunk.Body(mass, float("inf"))
    body.position = (x, y)
    space.add(body)
    return body


def make_spring(space: pymunk.Space, a: pymunk.Body, b: pymunk.Body,
                strength: float, damping: float, rest_length: float) -> pymunk.DampedSpring:
    """Create a damped spring between two particle centres and add it to the space."""
    spring = pymunk.DampedSpring(a, b, (0, 0), (0, 0), rest_length, strength, damping)
    space.add(spring)
    return spring


def make_fixed(body: pymunk.Body) -> None:
    """Pin a particle so that only code moves it."""
    if body.body_type != pymunk.Body.KINEMATIC:
        body.body_type = pymunk.Body.KINEMATIC
    body.velocity = (0, 0)


def make_free(body: pymunk.Body, mass: float) -> None:
    """Release a pinned particle back to the simulation."""
    if body.body_type == pymunk.Body.DYNAMIC:
        return
    body.body_type = pymunk.Body.DYNAMIC
    # Switching to dynamic recomputes mass from shapes, and particles have none.
    body.mass = mass
    body.moment = float("inf")
    body.velocity = (0, 0)


def is_fixed(body: pymunk.Body) -> bool:
    return body.body_type == pymunk.Body.KINEMATIC


def drag_to_damping(drag: float) -> float:
    """
    Map a drag coefficient to pymunk's space damping.

    Drag is a force opposing velocity, F = -drag * v. For a unit mass this
    gives v(t) = v0 * exp(-drag * t), and pymunk's damping is the fraction of
    velocity kept after one second.
    """
    if drag < 0:
        raise ValueError("drag must be non-negative")
    return math.exp(-drag)


def distance(a: pymunk.Body, b: pymunk.Body) -> float:
    return (a.position - b.position).length


def springs_of(space: pymunk.Space) -> list:
    """Return every damped spring in the space, in insertion order."""
    return [c for c in space.constraints if isinstance(c, pymunk.DampedSpring)]


def connects(a_end, b_end, p1, p2) -> bool:
    """True when (a_end, b_end) joins p1 and p2 in either orientation."""
    return (a_end is p1 and b_end is p2) or (a_end is p2 and b_end is p1)

import pymunk
from .physics import connects


class Attraction:
    """
    Inverse-square force between two particles.

    Positive strength pulls the particles together, negative pushes them
    apart. The distance is clamped below by `min_distance` so that
    coincident particles do not receive an unbounded force. Fixed particles
    are not moved.

    The particle mass is held here rather than read from the bodies: a fixed
    particle is a kinematic body, whose pymunk mass is infinite.
    """

    def __init__(self, one_end: pymunk.Body, the_other_end: pymunk.Body,
                 strength: float, min_distance: float, mass: float = 1.0):
        if min_distance <= 0:
            raise ValueError("min_distance must be positive")
        if mass <= 0:
            raise ValueError("mass must be positive")
        self.one_end = one_end
        self.the_other_end = the_other_end
        self.strength = strength
        self.min_distance = min_distance
        self.mass = mass

    def get_one_end(self):
        return self.one_end

    def get_the_other_end(self):
        return self.the_other_end

    def connects(self, p1, p2) -> bool:
        return connects(self.one_end, self.the_other_end, p1, p2)

    def force_on_one_end(self) -> pymunk.Vec2d:
        """Force vector acting on `one_end`; `the_other_end` gets its negation."""
        a, b = self.one_end, self.the_other_end
        delta = b.position - a.position
        d = delta.length
        if d == 0:
            return pymunk.Vec2d(0, 0)
        d_sq = max(d * d, self.min_distance * self.min_distance)
        magnitude = self.strength * self.mass * self.mass / d_sq
        return delta / d * magnitude

    def apply(self) -> None:
        """Accumulate this attraction's force on both particles for the next step."""
        force = self.force_on_one_end()
        a, b = self.one_end, self.the_other_end
        if a.body_type == pymunk.Body.DYNAMIC:
            a.apply_force_at_world_point(force, a.position)
        if b.body_type == pymunk.Body.DYNAMIC:
            b.apply_force_at_world_point(-force, b.position)

    def __repr__(self):
        return f"Attraction(strength={self.strength}, min_distance={self.min_distance}, mass={self.mass})"

class CameraSmoother:
    """
    Exponential easing of a camera centre (x, y) and zoom (z) toward a target.

    Each tick moves every component a fixed fraction of the way to its
    target: value = smoothness * value + (1 - smoothness) * target.
    """

    def __init__(self, smoothness=0.9):
        if not 0 <= smoothness < 1:
            raise ValueError("smoothness must be in [0, 1)")
        self.smoothness = smoothness
        self._value = [0.0, 0.0, 1.0]
        self._target = [0.0, 0.0, 1.0]

    def set_target(self, x, y, z):
        self._target = [float(x), float(y), float(z)]

    def set_value(self, x, y, z):
        """Jump straight to a value without easing."""
        self._value = [float(x), float(y), float(z)]

    def tick(self):
        s = self.smoothness
        self._value = [s * v + (1.0 - s) * t for v, t in zip(self._value, self._target)]

    def x(self):
        return self._value[0]

    def y(self):
        return self._value[1]

    def z(self):
        return self._value[2]

    def target(self):
        return tuple(self._target)

    def value(self):
        return tuple(self._value)

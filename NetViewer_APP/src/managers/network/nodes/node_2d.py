from .base_node import BaseNode

class Node2D(BaseNode):
    """Node with a planar location, drawn as a circle."""

    schema = {
        **BaseNode.get_schema(),
        "n_x": float,
        "n_y": float
    }

    DIAMETER = 10.0

    def get_location(self):
        """Return (x, y) of the node's initial location."""
        return (self.n_x, self.n_y)

    def draw(self, context, x, y, diameter=DIAMETER):
        """Draw the node at (x, y) using the context's current fill and stroke."""
        context.ellipse(x, y, diameter, diameter)

import numpy as np
from utils.logger.logger import Logger


class SketchCanvas:
    """
    Processing-style drawing context over a tkinter Canvas.

    Shapes are given in model coordinates and mapped to the canvas through
    the current affine matrix (push/pop, translate, scale). tkinter has no
    alpha channel, so translucent colours are blended against the
    background colour before they reach the canvas.

    Any object providing create_line, create_oval and delete can stand in for
    the tkinter Canvas.
    """

    DEFAULT_BACKGROUND = (229, 229, 229)  # grey90

    def __init__(self, canvas, background="grey90"):
        """Wrap `canvas`; `background` is a tk colour name, '#rrggbb' or an (r, g, b) tuple."""
        self.canvas = canvas
        self.matrix = np.identity(3)
        self._stack = []
        self._stroke = "#000000"
        self._fill = "#ffffff"
        self._stroke_weight = 1.0
        self.background_rgb = self._resolve_rgb(background)
        Logger.log("SketchCanvas initialized")

    # ------------------------------ Colours ------------------------------

    def _resolve_rgb(self, color):
        if isinstance(color, (tuple, list)):
            return tuple(int(c) for c in color[:3])
        if isinstance(color, str) and color.startswith("#") and len(color) == 7:
            return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))
        winfo_rgb = getattr(self.canvas, "winfo_rgb", None)
        if winfo_rgb is not None:
            # tk reports 16-bit channels
            return tuple(c // 257 for c in winfo_rgb(color))
        return self.DEFAULT_BACKGROUND

    @staticmethod
    def _rgba(components):
        """Processing colour arguments: (gray), (gray, alpha), (r, g, b) or (r, g, b, alpha)."""
        if len(components) == 1:
            return (components[0],) * 3 + (255,)
        if len(components) == 2:
            return (components[0],) * 3 + (components[1],)
        if len(components) == 3:
            return tuple(components) + (255,)
        if len(components) == 4:
            return tuple(components)
        raise ValueError(f"Expected 1 to 4 colour components, got {len(components)}")

    def blend(self, *components):
        """Return the '#rrggbb' of a colour composited over the background."""
        r, g, b, a = self._rgba(components)
        alpha = min(max(a, 0), 255) / 255.0
        rgb = alpha * np.array([r, g, b], dtype=float) + (1.0 - alpha) * np.array(self.background_rgb, dtype=float)
        rgb = np.clip(np.rint(rgb), 0, 255).astype(int)
        return "#{:02x}{:02x}{:02x}".format(*rgb)

    def stroke(self, *components):
        self._stroke = self.blend(*components)

    def no_stroke(self):
        self._stroke = None

    def fill(self, *components):
        self._fill = self.blend(*components)

    def no_fill(self):
        self._fill = None

    def stroke_weight(self, weight):
        if weight < 0:
            raise ValueError("stroke weight must be non-negative")
        self._stroke_weight = float(weight)

    def get_stroke_weight(self):
        return self._stroke_weight

    def background(self, color):
        """Change the background colour and clear the canvas."""
        self.background_rgb = self._resolve_rgb(color)
        configure = getattr(self.canvas, "configure", None)
        if configure is not None:
            configure(bg="#{:02x}{:02x}{:02x}".format(*self.background_rgb))
        self.clear()

    # ------------------------------ Matrix ------------------------------

    def push_matrix(self):
        self._stack.append(self.matrix.copy())

    def pop_matrix(self):
        if not self._stack:
            raise RuntimeError("pop_matrix() called more times than push_matrix()")
        self.matrix = self._stack.pop()

    def reset_matrix(self):
        self.matrix = np.identity(3)

    def translate(self, dx, dy):
        self.matrix = self.matrix @ np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])

    def scale(self, sx, sy=None):
        sy = sx if sy is None else sy
        self.matrix = self.matrix @ np.diag([sx, sy, 1.0])

    def to_screen(self, x, y):
        sx, sy, _ = self.matrix @ np.array([x, y, 1.0])
        return (float(sx), float(sy))

    def to_world(self, x, y):
        wx, wy, _ = np.linalg.inv(self.matrix) @ np.array([x, y, 1.0])
        return (float(wx), float(wy))

    def scale_factor(self):
        """Uniform scale of the current matrix."""
        return float(np.sqrt(abs(np.linalg.det(self.matrix[:2, :2]))))

    # ------------------------------ Shapes ------------------------------

    def line(self, x1, y1, x2, y2):
        """Draw a line with the current stroke; stroke weight is in screen pixels."""
        if self._stroke is None or self._stroke_weight <= 0:
            return None
        sx1, sy1 = self.to_screen(x1, y1)
        sx2, sy2 = self.to_screen(x2, y2)
        return self.canvas.create_line(sx1, sy1, sx2, sy2, fill=self._stroke, width=self._stroke_weight)

    def ellipse(self, cx, cy, w, h):
        """Draw an ellipse centred on (cx, cy) with width w and height h in model units."""
        if self._stroke is None and self._fill is None:
            return None
        sx, sy = self.to_screen(cx, cy)
        k = self.scale_factor()
        rx, ry = w * k / 2.0, h * k / 2.0
        return self.canvas.create_oval(
            sx - rx, sy - ry, sx + rx, sy + ry,
            fill=self._fill or "",
            outline=self._stroke or "",
            width=self._stroke_weight if self._stroke else 0,
        )

    def clear(self):
        """Delete everything drawn on the canvas."""
        self.canvas.delete("all")

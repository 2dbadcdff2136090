import math
from utils.logger.logger import Logger


class ZoomPan:
    """
    Interactive zooming and panning driven by mouse events.

    Panning (left drag) and drag-zooming (right drag) only happen while the
    mouse mask modifier is held, so plain clicks stay available to the
    application. The wheel zooms about the pointer regardless of the mask.
    The event methods take plain coordinates, and `attach` wires them to a
    tkinter widget.
    """

    SHIFT = "shift"
    CONTROL = "control"
    NONE = None

    # tkinter event.state bits
    _STATE_BITS = {SHIFT: 0x0001, CONTROL: 0x0004}

    LEFT_BUTTON = 1
    RIGHT_BUTTON = 3

    def __init__(self, camera=None, mouse_mask=SHIFT):
        """
        Args:
            camera: CameraConfig supplying zoom limits and wheel factor (defaults when omitted).
            mouse_mask: Modifier that must be held to pan or drag-zoom (SHIFT, CONTROL or NONE).
        """
        self.min_zoom = getattr(camera, "min_zoom", 0.05)
        self.max_zoom = getattr(camera, "max_zoom", 50.0)
        self.wheel_zoom_factor = getattr(camera, "wheel_zoom_factor", 1.1)
        self.set_mouse_mask(mouse_mask)

        self.zoom_scale = 1.0
        self.pan_x = 0.0
        self.pan_y = 0.0
        self.mouse_x = 0.0
        self.mouse_y = 0.0

        self._mode = None          # None, "pan" or "zoom"
        self._press = (0.0, 0.0)
        self._press_pan = (0.0, 0.0)
        self._press_zoom = 1.0

    # ------------------------------ Settings ------------------------------

    def set_mouse_mask(self, mouse_mask):
        if mouse_mask not in (self.SHIFT, self.CONTROL, self.NONE):
            raise ValueError(f"Unknown mouse mask: '{mouse_mask}'")
        self.mouse_mask = mouse_mask

    def get_zoom_scale(self):
        return self.zoom_scale

    def set_zoom_scale(self, scale):
        """Set the zoom, clamped to the configured limits."""
        self.zoom_scale = min(max(float(scale), self.min_zoom), self.max_zoom)

    def get_pan_offset(self):
        return (self.pan_x, self.pan_y)

    def set_pan_offset(self, x, y):
        self.pan_x = float(x)
        self.pan_y = float(y)

    def reset(self):
        """Back to no zoom and no pan."""
        self.zoom_scale = 1.0
        self.pan_x = 0.0
        self.pan_y = 0.0
        self._mode = None
        Logger.log("Zoom and pan reset")

    # ------------------------------ Queries ------------------------------

    def is_mouse_captured(self):
        """True while a pan or zoom drag is in progress."""
        return self._mode is not None

    def get_mouse_coord(self):
        """Mouse position with the zoom/pan transform removed."""
        return ((self.mouse_x - self.pan_x) / self.zoom_scale,
                (self.mouse_y - self.pan_y) / self.zoom_scale)

    def transform(self, context):
        """Apply the zoom/pan transform to a drawing context."""
        context.translate(self.pan_x, self.pan_y)
        context.scale(self.zoom_scale)

    # ------------------------------ Events ------------------------------

    def _mask_held(self, modifiers):
        return self.mouse_mask is self.NONE or self.mouse_mask in modifiers

    def move(self, x, y):
        self.mouse_x = float(x)
        self.mouse_y = float(y)

    def press(self, x, y, button=LEFT_BUTTON, modifiers=()):
        self.move(x, y)
        if not self._mask_held(modifiers):
            return
        if button == self.LEFT_BUTTON:
            self._mode = "pan"
        elif button == self.RIGHT_BUTTON:
            self._mode = "zoom"
        else:
            return
        self._press = (self.mouse_x, self.mouse_y)
        self._press_pan = (self.pan_x, self.pan_y)
        self._press_zoom = self.zoom_scale

    def drag(self, x, y):
        self.move(x, y)
        px, py = self._press
        if self._mode == "pan":
            self.pan_x = self._press_pan[0] + (self.mouse_x - px)
            self.pan_y = self._press_pan[1] + (self.mouse_y - py)
        elif self._mode == "zoom":
            # Dragging up zooms in, about the press point.
            new_zoom = self._press_zoom * math.exp((py - self.mouse_y) / 100.0)
            self._zoom_about(px, py, new_zoom, self._press_pan, self._press_zoom)

    def release(self, x, y):
        self.move(x, y)
        self._mode = None

    def wheel(self, x, y, steps):
        """Zoom about (x, y); positive steps zoom in."""
        self.move(x, y)
        new_zoom = self.zoom_scale * self.wheel_zoom_factor ** steps
        self._zoom_about(x, y, new_zoom, (self.pan_x, self.pan_y), self.zoom_scale)

    def _zoom_about(self, x, y, new_zoom, pan, zoom):
        # Keep the point under (x, y) fixed on screen.
        world_x = (x - pan[0]) / zoom
        world_y = (y - pan[1]) / zoom
        self.set_zoom_scale(new_zoom)
        self.pan_x = x - world_x * self.zoom_scale
        self.pan_y = y - world_y * self.zoom_scale

    # ------------------------------ tkinter ------------------------------

    @classmethod
    def modifiers_of(cls, event):
        state = getattr(event, "state", 0)
        if not isinstance(state, int):
            return ()
        return tuple(name for name, bit in cls._STATE_BITS.items() if state & bit)

    def attach(self, widget):
        """Bind mouse events of a tkinter widget. Other handlers can still be added with add='+'."""
        widget.bind("<Motion>", lambda e: self.move(e.x, e.y), add="+")
        widget.bind("<ButtonPress-1>", lambda e: self.press(e.x, e.y, self.LEFT_BUTTON, self.modifiers_of(e)), add="+")
        widget.bind("<ButtonPress-3>", lambda e: self.press(e.x, e.y, self.RIGHT_BUTTON, self.modifiers_of(e)), add="+")
        widget.bind("<B1-Motion>", lambda e: self.drag(e.x, e.y), add="+")
        widget.bind("<B3-Motion>", lambda e: self.drag(e.x, e.y), add="+")
        widget.bind("<ButtonRelease-1>", lambda e: self.release(e.x, e.y), add="+")
        widget.bind("<ButtonRelease-3>", lambda e: self.release(e.x, e.y), add="+")
        widget.bind("<MouseWheel>", lambda e: self.wheel(e.x, e.y, 1 if e.delta > 0 else -1), add="+")
        widget.bind("<Button-4>", lambda e: self.wheel(e.x, e.y, 1), add="+")
        widget.bind("<Button-5>", lambda e: self.wheel(e.x, e.y, -1), add="+")
        Logger.log("ZoomPan attached to widget")

"""
Pytest configuration for NetViewer tests.

Puts the project root on sys.path, resets global flags and logger state
between tests, and provides display-free stand-ins for the drawing context,
the tk canvas and the zoom/pan handler.
"""

import sys
import os

import pytest

# Add project root to sys.path for imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from src.config.feature_flags import FeatureFlags
from utils.logger.logger import Logger
from utils.logger.log_storage_strategy import MemoryStrategy


class RecordingContext:
    """Drawing context that records calls instead of drawing."""

    def __init__(self, stroke_weight=1.0):
        self.calls = []
        self.depth = 0
        self.weight = stroke_weight

    def _record(self, name, *args):
        self.calls.append((name, args))

    def push_matrix(self):
        self.depth += 1
        self._record("push_matrix")

    def pop_matrix(self):
        self.depth -= 1
        self._record("pop_matrix")

    def translate(self, dx, dy):
        self._record("translate", dx, dy)

    def scale(self, sx, sy=None):
        self._record("scale", sx)

    def stroke(self, *color):
        self._record("stroke", *color)

    def no_stroke(self):
        self._record("no_stroke")

    def fill(self, *color):
        self._record("fill", *color)

    def no_fill(self):
        self._record("no_fill")

    def get_stroke_weight(self):
        return self.weight

    def line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def ellipse(self, x, y, w, h):
        self._record("ellipse", x, y, w, h)

    def names(self):
        return [name for name, _ in self.calls]

    def shapes(self, name):
        return [args for n, args in self.calls if n == name]


class FakeTkCanvas:
    """Records tk Canvas item creation."""

    def __init__(self):
        self.items = []
        self.deleted = 0

    def create_line(self, *coords, **options):
        self.items.append(("line", coords, options))
        return len(self.items)

    def create_oval(self, *coords, **options):
        self.items.append(("oval", coords, options))
        return len(self.items)

    def delete(self, tag):
        self.deleted += 1
        self.items = []


class FakeZoomer:
    """Zoom/pan handler with no zoom, a settable mouse and optional capture."""

    def __init__(self, mouse=(0.0, 0.0)):
        self.mouse = mouse
        self.captured = False
        self.resets = 0

    def transform(self, context):
        pass

    def get_mouse_coord(self):
        return self.mouse

    def is_mouse_captured(self):
        return self.captured

    def reset(self):
        self.resets += 1


@pytest.fixture(autouse=True)
def clean_globals():
    """Default flags and an in-memory log for every test."""
    FeatureFlags.defaults()
    memory = MemoryStrategy()
    Logger.set_log_storage_strategy(memory)
    Logger.set_minimum_priority(Logger.LogPriority.DEBUG)
    Logger.enable_logging()
    yield memory
    FeatureFlags.defaults()
    Logger.set_log_storage_strategy(None)


@pytest.fixture
def log_memory(clean_globals):
    return clean_globals


@pytest.fixture
def context():
    return RecordingContext()


@pytest.fixture
def tk_canvas():
    return FakeTkCanvas()


@pytest.fixture
def zoomer():
    return FakeZoomer()

class SystemState:
    """Lightweight container for global UI/runtime flags."""

    def __init__(self):
        """Initialize defaults."""
        self.network_loaded = False
        self.viewer_attached = False
        self.source = None         # File path the network came from, or "generated"
        self.frames_drawn = 0
        self.ticks_run = 0

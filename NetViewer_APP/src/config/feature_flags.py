"""
Feature Flag System for the NetViewer particle viewer.

Runtime switches for optional per-frame behaviour. Flags default to the
behaviour of the classic viewer: edges drawn, camera auto-centred.

Usage:
    from src.config.feature_flags import FeatureFlags

    if FeatureFlags.AUTO_CENTRE:
        # Recompute camera target from particle bounding box
"""


class FeatureFlags:
    """
    Global feature flag registry.

    Flags are toggleable at runtime (CLI, tests, keyboard shortcuts).
    """

    DRAW_EDGES = True
    """
    Draw edges each frame.

    When False, edges are skipped even if the drawing context has a
    positive stroke weight. Useful for dense networks where only node
    positions matter.
    """

    AUTO_CENTRE = True
    """
    Recompute the camera target every frame from the bounding box of all
    particles.

    When False, the camera keeps easing toward its last target, so the view
    stays put while the user inspects part of the layout.
    """

    @classmethod
    def defaults(cls):
        """Reset all flags to their defaults."""
        cls.DRAW_EDGES = True
        cls.AUTO_CENTRE = True

    @classmethod
    def toggle_auto_centre(cls):
        cls.AUTO_CENTRE = not cls.AUTO_CENTRE
        return cls.AUTO_CENTRE

    @classmethod
    def toggle_draw_edges(cls):
        cls.DRAW_EDGES = not cls.DRAW_EDGES
        return cls.DRAW_EDGES

    @classmethod
    def as_dict(cls) -> dict:
        return {"DRAW_EDGES": cls.DRAW_EDGES, "AUTO_CENTRE": cls.AUTO_CENTRE}

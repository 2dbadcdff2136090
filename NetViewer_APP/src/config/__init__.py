"""
NetViewer Configuration Module

Contains feature flags and viewer configuration settings.
"""

from .feature_flags import FeatureFlags
from .viewer_config import ViewerConfig, load_config

__all__ = ["FeatureFlags", "ViewerConfig", "load_config"]

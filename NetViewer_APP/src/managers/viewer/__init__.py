"""
Particle viewer: force-directed layout animated on a pymunk space.
"""

from .particle_viewer import ParticleViewer
from .camera_smoother import CameraSmoother
from .attraction import Attraction

__all__ = ["ParticleViewer", "CameraSmoother", "Attraction"]

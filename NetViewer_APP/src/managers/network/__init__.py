"""
Network model: nodes, edges, networks and the factory that builds them.
"""

from .nodes.node_2d import Node2D
from .edges.base_edge import BaseEdge
from .networks.network_2d import Network2D
from .network_factory import NetworkFactory

__all__ = ["Node2D", "BaseEdge", "Network2D", "NetworkFactory"]

from utils.logger.logger import Logger
from ..nodes.node_2d import Node2D
from ..edges.base_edge import BaseEdge
from .base_network import BaseNetwork

class Network2D(BaseNetwork):
    """Planar network laid out by the particle viewer.

    Optional metadata:
        drag: drag applied to every particle.
        repulsion: when set, every node pair gets a repulsive force of this strength.
        spring_length: when set, every pair of nodes not joined by an edge gets
            an auxiliary spring of this rest length.
    """

    allowed_node_type = Node2D
    allowed_edge_type = BaseEdge
    schema = {
        "meta_data": [],
        "meta_data_types": {
            "drag": float,
            "repulsion": float,
            "spring_length": float,
        },
        "node_attributes": allowed_node_type.get_schema(),
        "edge_attributes": allowed_edge_type.get_schema(),
    }

    def __init__(self, data):
        Logger.log(f"start Network2D __init__(self)")
        meta_data = data.get("meta_data", {})
        nodes = data.get("nodes", []) 
        edges = data.get("edges", [])
        super().__init__(nodes=nodes, edges=edges, meta_data=meta_data, schema=Network2D.schema)
        Logger.log(f"end Network2D __init__(self, nodes={len(self.nodes)}, edges={len(self.edges)})")

    def bounds(self):
        """Return (x_min, y_min, x_max, y_max) of node locations, or None when empty."""
        if not self.nodes:
            return None
        xs = [node.n_x for node in self.nodes]
        ys = [node.n_y for node in self.nodes]
        return (min(xs), min(ys), max(xs), max(ys))

from collections import defaultdict
import numpy as np
from utils.logger.logger import Logger

# TYPES OF NETWORKS
from .networks.base_network import BaseNetwork
from .networks.network_2d import Network2D

# TYPES OF NODES
from .nodes.node_2d import Node2D

# TYPES OF EDGES
from .edges.base_edge import BaseEdge

class NetworkFactory:
    """Create networks/nodes/edges from input data matching registered schemas."""
    # DICTIONARY TO STORE REGISTERED NETWORK TYPES
    _network_types = {}
    # REGISTERED NODE TYPES
    _node_types = defaultdict(list)
    # REGISTERED EDGE TYPES
    _edge_types = defaultdict(list)


    @classmethod
    def register_network_type(cls, network_class):
        """Register a network class."""
        Logger.log(f"Registering network class {network_class}")
        cls._network_types[network_class] = network_class


    @classmethod
    def register_node_type(cls, network_class, node_class):
        """Register a node class for a network class."""
        Logger.log(f"Registering node type '{network_class}' with class {node_class}")
        cls._node_types[network_class].append(node_class)

    @classmethod
    def register_edge_type(cls, network_class, edge_class):
        """Register an edge class for a network class."""
        Logger.log(f"Registering edge type '{network_class}' with class {edge_class}")
        cls._edge_types[network_class].append(edge_class)

    @staticmethod
    def _rows(table):
        """Turn a column table {header: [values]} into a list of row dicts."""
        if not table:
            return []
        keys = list(table.keys())
        return [{key: table[key][i] for key in keys} for i in range(len(table[keys[0]]))]

    @classmethod
    def _build_all(cls, rows, candidates, kind):
        built = []
        for row in rows:
            for candidate in candidates:
                try:
                    built.append(candidate(row))
                    break
                except ValueError as e:
                    Logger.log(f"{kind} class {candidate} failed: {e}")
            else:
                raise ValueError(f"No matching {kind} class for {kind}: {row}")
        return built

    @classmethod
    def create_network(cls, data: dict):
        """Build a network object from column tables using registered types."""
        Logger.log(f"start create_network(self, tables={list(data.keys())})")

        for network_type, network_class in cls._network_types.items():
            if cls._matches_schema(data, network_class.schema):
                Logger.log(f"Found matching network type '{network_type}'")

                node_classes = cls._node_types.get(network_class, []) + cls._node_types.get(BaseNetwork, [])
                edge_classes = cls._edge_types.get(network_class, []) + cls._edge_types.get(BaseNetwork, [])

                nodes = cls._build_all(cls._rows(data.get("nodes", {})), node_classes, "node")
                edges = cls._build_all(cls._rows(data.get("edges", {})), edge_classes, "edge")

                network = network_class({
                    "nodes": nodes,
                    "edges": edges,
                    "meta_data": data.get("meta_data", {}),
                })
                Logger.log(f"Network created: {len(nodes)} nodes, {len(edges)} edges", Logger.LogPriority.INFO)
                return network

        raise ValueError("No matching network type found.")

    @classmethod
    def _matches_schema(cls, data: dict, schema):
        """Return True if data contains required meta/node/edge fields."""
        meta_data = data.get("meta_data", {})

        for attr in schema.get("meta_data", []):
            if attr not in meta_data:
                Logger.log(f"meta_data: Attribute '{attr}' not found in data. Schema mismatch.")
                return False

        for table_name, schema_key in (("nodes", "node_attributes"), ("edges", "edge_attributes")):
            table = data.get(table_name, {})
            if not table:
                Logger.log(f"No {table_name} found in data.")
                continue
            for attr in schema.get(schema_key, []):
                if attr not in table:
                    Logger.log(f"{table_name}: Attribute '{attr}' not found. Schema mismatch.")
                    return False

        return True

    @classmethod
    def random_network(cls, n_nodes, n_edges, seed=None, extent=100.0, meta_data=None):
        """
        Build a connected-as-possible random Network2D.

        Node locations are uniform in [0, extent]^2. Edges first form a random
        spanning tree, then random extra pairs are added until n_edges is reached.

        Raises:
            ValueError: For negative counts or more edges than node pairs.
        """
        Logger.log(f"start random_network(n_nodes={n_nodes}, n_edges={n_edges}, seed={seed})")
        if n_nodes < 0 or n_edges < 0:
            raise ValueError("Node and edge counts must be non-negative.")
        max_edges = n_nodes * (n_nodes - 1) // 2
        if n_edges > max_edges:
            raise ValueError(f"Cannot place {n_edges} edges between {n_nodes} nodes (max {max_edges}).")

        rng = np.random.default_rng(seed)
        locations = rng.uniform(0.0, extent, size=(n_nodes, 2))
        nodes = [Node2D({"n_id": i + 1, "n_x": x, "n_y": y}) for i, (x, y) in enumerate(locations)]

        pairs = []
        seen = set()
        for i in range(1, n_nodes):
            if len(pairs) >= n_edges:
                break
            j = int(rng.integers(0, i))
            pairs.append((j + 1, i + 1))
            seen.add(frozenset((j + 1, i + 1)))
        while len(pairs) < n_edges:
            a, b = (int(v) + 1 for v in rng.choice(n_nodes, size=2, replace=False))
            if frozenset((a, b)) in seen:
                continue
            seen.add(frozenset((a, b)))
            pairs.append((a, b))

        edges = [BaseEdge({"e_id": k + 1, "n_from": a, "n_to": b}) for k, (a, b) in enumerate(pairs)]
        return Network2D({"nodes": nodes, "edges": edges, "meta_data": meta_data or {}})


# REGISTER NETWORK, NODE, AND EDGE TYPES
NetworkFactory.register_network_type(Network2D)
NetworkFactory.register_node_type(Network2D, Node2D)
NetworkFactory.register_edge_type(Network2D, BaseEdge)

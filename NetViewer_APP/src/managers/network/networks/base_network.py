from utils.logger.logger import Logger
from ..nodes.base_node import BaseNode 
from ..edges.base_edge import BaseEdge 

class BaseNetwork:
    """Network with nodes, edges, and metadata."""

    allowed_node_type = BaseNode
    allowed_edge_type = BaseEdge
    
    def __init__(self, nodes=None, edges=None, meta_data=None, schema=None):
        """Initialize nodes, edges, metadata, and schema; bind edge endpoints."""
        Logger.log(f"start BaseNetwork __init__(self, nodes={len(nodes or [])}, edges={len(edges or [])})")

        self.nodes = []
        self.edges = []
        self.meta_data = {}
        self.schema = schema or {
            "meta_data": [],
            "meta_data_types": {},
            "node_attributes": self.allowed_node_type.get_schema(),
            "edge_attributes": self.allowed_edge_type.get_schema(),
        }

        for node in nodes or []:
            self.add_node(node)
        for edge in edges or []:
            self.add_edge(edge)
        for key, value in (meta_data or {}).items():
            self.add_meta_data(key, value)

        Logger.log("end BaseNetwork __init__(self, nodes, edges, meta_data, schema)")

    def safe_cast(self, value, expected_type):
        """Cast value to expected_type; handle common cases."""
        try:
            if expected_type == bool:
                return str(value).strip().lower() in ["true", "1", "yes"]
            return expected_type(value)
        except (ValueError, TypeError):
            raise ValueError(f"Invalid value: '{value}' is not of type {expected_type.__name__}")

    def get_nodes(self):
        """Return nodes list."""
        return self.nodes

    def get_edges(self):
        """Return edges list."""
        return self.edges

    def get_meta_data(self):
        """Return metadata dict."""
        return self.meta_data

    def _allowed_meta_data_keys(self):
        return set(self.schema.get("meta_data", [])) | set(self.schema.get("meta_data_types", {}))

    def add_meta_data(self, key, value):
        """Add metadata entry with schema/type check."""
        if key not in self._allowed_meta_data_keys():
            raise ValueError(f"Meta data key '{key}' is not allowed by the schema.")
        
        expected_type = self.schema.get("meta_data_types", {}).get(key, type(value))
        value = self.safe_cast(value, expected_type)

        if key not in self.meta_data:
            self.meta_data[key] = value
            Logger.log(f"Meta data added: {key} = {value}")
        else:
            Logger.log(f"Meta data key '{key}' already exists. Use update_meta_data to change it.")

    def update_meta_data(self, key, value):
        """Update metadata entry with schema/type check."""
        if key not in self._allowed_meta_data_keys():
            raise ValueError(f"Meta data key '{key}' is not allowed by the schema.")

        expected_type = self.schema.get("meta_data_types", {}).get(key, type(value))
        value = self.safe_cast(value, expected_type)

        self.meta_data[key] = value
        Logger.log(f"Meta data updated: {key} = {value}")

    def add_node(self, node):
        """Add a node to the network (ID must be unique)."""
        if self.get_node_by_id(node.get_id()) is not None:
            raise ValueError(f"Node with ID '{node.get_id()}' already exists in the network.")
        self.nodes.append(node)

    def add_edge(self, edge):
        """Add a valid edge (existing distinct endpoints) and bind its node objects."""
        if self.get_edge_by_id(edge.get_id()) is not None:
            raise ValueError(f"Edge with ID '{edge.get_id()}' already exists in the network.")

        if not hasattr(edge, "n_from") or not hasattr(edge, "n_to"):
            Logger.log("Edge is missing 'n_from' or 'n_to'", Logger.LogPriority.ERROR)
            raise ValueError("Edge must have 'n_from' and 'n_to' attributes.")

        if edge.n_from == edge.n_to:
            Logger.log(f"Invalid edge: 'n_from' ({edge.n_from}) and 'n_to' are the same", Logger.LogPriority.ERROR)
            raise ValueError("'n_from' and 'n_to' cannot be the same node.")

        node_from = self.get_node_by_id(edge.n_from)
        if node_from is None:
            Logger.log(f"Invalid 'n_from' reference: {edge.n_from} not found.", Logger.LogPriority.ERROR)
            raise ValueError(f"'n_from' value {edge.n_from} does not exist in network.")

        node_to = self.get_node_by_id(edge.n_to)
        if node_to is None:
            Logger.log(f"Invalid 'n_to' reference: {edge.n_to} not found.", Logger.LogPriority.ERROR)
            raise ValueError(f"'n_to' value {edge.n_to} does not exist in network.")

        edge.bind_nodes(node_from, node_to)
        self.edges.append(edge)
        Logger.log(f"Edge added: {edge.n_from} -> {edge.n_to}")

    def get_node_by_id(self, node_id):
        """Return node by ID or None."""
        for node in self.nodes:
            if node.get_id() == node_id:
                return node
        return None

    def get_edge_by_id(self, edge_id):
        """Return edge by ID or None."""
        for edge in self.edges:
            if edge.get_id() == edge_id:
                return edge
        return None

    def adjacent_pairs(self):
        """Return the set of frozensets of node IDs joined by an edge."""
        return {frozenset((edge.n_from, edge.n_to)) for edge in self.edges}
    
    def log_network(self):
        """Logs the current state of the network: nodes, edges, and metadata."""
        Logger.log("===== Network State =====")
        Logger.log(f"Nodes: {len(self.nodes)}")
        for node in self.nodes:
            Logger.log(f"{node.get_attributes()}")
        Logger.log(f"Edges: {len(self.edges)}")
        for edge in self.edges:
            Logger.log(f"{edge.get_attributes()}")
        Logger.log("Meta Data:")
        for key, value in self.meta_data.items():
            Logger.log(f"{key}: {value}")
        Logger.log("=========================")

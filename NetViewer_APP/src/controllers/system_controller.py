from itertools import combinations

from src.managers.input.input_manager import InputManager
from src.managers.view.view_manager import ViewManager
from src.managers.export.export_manager import ExportManager
from src.managers.network.network_factory import NetworkFactory
from src.managers.viewer.particle_viewer import ParticleViewer
from src.config.viewer_config import ViewerConfig
from utils.logger.logger import Logger
from utils.logger.local_file_strategy import LocalFileStrategy
from utils.logger.log_storage_strategy import MemoryStrategy
from src.models.system_state import SystemState
from src.models.exceptions import StateTransitionError, NodeNotFoundError
from src.managers.network.networks.base_network import BaseNetwork

class SystemController:
    """Coordinates input, viewer, view, export, and logging layers."""
    def __init__(self, config=None):
        """Initialize managers and shared state."""
        Logger.log("start SystemController __init__(self)")
        self.config = config or ViewerConfig()
        self.input_manager = InputManager()
        self.view_manager = ViewManager(self)
        self.export_manager = ExportManager()
        self.system_state = SystemState()
        self.network = None
        self.viewer = None

        Logger.log("SystemController initialized.")
        Logger.log("end SystemController __init__(self)")

    def input_network(self, input_data):
        """Load a network from a file path or `BaseNetwork`, dropping any attached viewer."""
        Logger.log(f"start input_network(self, {input_data})")
        if isinstance(input_data, BaseNetwork):
            network = input_data
            source = "network"
        else:
            network = self.input_manager.get_network(input_data)
            source = str(input_data)

        self._set_network(network, source)
        Logger.log("end input_network(self, input_data)")

    def generate_network(self, n_nodes, n_edges, seed=None, meta_data=None):
        """Load a random network instead of one read from a file."""
        Logger.log(f"start generate_network(self, {n_nodes}, {n_edges}, seed={seed})")
        network = NetworkFactory.random_network(n_nodes, n_edges, seed=seed, meta_data=meta_data)
        self._set_network(network, "generated")
        Logger.log("end generate_network(self, n_nodes, n_edges, seed)")

    def _set_network(self, network, source):
        self.network = network
        self.viewer = None
        self.system_state.network_loaded = True
        self.system_state.viewer_attached = False
        self.system_state.source = source
        self.system_state.frames_drawn = 0
        self.system_state.ticks_run = 0
        network.log_network()
        Logger.log(f"Network loaded from {source}: {len(network.get_nodes())} nodes, {len(network.get_edges())} edges",
                   Logger.LogPriority.INFO)

    def attach_viewer(self, context=None, zoomer=None, width=None, height=None):
        """
        Build a ParticleViewer for the loaded network and return it.

        Every node becomes a particle and every edge a spring. Network metadata
        adds the optional extras: `drag`, a repulsive force of strength
        `repulsion` between every node pair, and springs of rest length
        `spring_length` between every pair not joined by an edge.

        A viewer attached without a context can only be ticked, not drawn.
        """
        Logger.log("start attach_viewer(self)")
        network = self._require_network("attach a viewer")
        width = width or self.config.style.width
        height = height or self.config.style.height

        viewer = ParticleViewer(context, width, height, zoomer=zoomer, config=self.config)
        for node in network.get_nodes():
            viewer.add_node(node)
        for edge in network.get_edges():
            viewer.add_edge(edge)

        meta_data = network.get_meta_data()
        if "drag" in meta_data:
            viewer.set_drag(meta_data["drag"])

        repulsion = meta_data.get("repulsion")
        spring_length = meta_data.get("spring_length")
        if repulsion is not None or spring_length is not None:
            adjacent = network.adjacent_pairs()
            for node1, node2 in combinations(network.get_nodes(), 2):
                if repulsion is not None:
                    viewer.add_force(node1, node2, -abs(repulsion))
                if spring_length is not None and frozenset((node1.get_id(), node2.get_id())) not in adjacent:
                    viewer.add_spring(node1, node2, spring_length)

        self.viewer = viewer
        self.system_state.viewer_attached = True
        Logger.log("end attach_viewer(self)")
        return viewer

    def _require_network(self, action):
        if not self.system_state.network_loaded or self.network is None:
            Logger.log(f"StateTransitionError: Cannot {action}, network not loaded.", Logger.LogPriority.ERROR)
            raise StateTransitionError(f"Cannot {action}, network not loaded.")
        return self.network

    def _require_viewer(self, action):
        self._require_network(action)
        if self.viewer is None:
            Logger.log(f"No viewer attached; attaching a headless viewer to {action}.")
            self.attach_viewer()
        return self.viewer

    def _node(self, node_id):
        node = self.network.get_node_by_id(node_id)
        if node is None:
            Logger.log(f"NodeNotFoundError: node {node_id} not in network.", Logger.LogPriority.ERROR)
            raise NodeNotFoundError(f"Node ID {node_id} not found in network.")
        return node

    def tick(self, steps=1):
        """Advance the layout `steps` physics steps without drawing."""
        Logger.log(f"start tick(self, {steps})")
        if steps < 0:
            raise ValueError("steps must be non-negative")
        viewer = self._require_viewer("tick")
        for _ in range(steps):
            viewer.update_particles()
        self.system_state.ticks_run += steps
        Logger.log(f"end tick(self, steps); total ticks {self.system_state.ticks_run}")

    def draw_frame(self):
        """Draw one frame of the attached viewer."""
        viewer = self._require_viewer("draw")
        if viewer.context is None:
            Logger.log("StateTransitionError: Cannot draw, no drawing context attached.", Logger.LogPriority.ERROR)
            raise StateTransitionError("Cannot draw, no drawing context attached.")
        viewer.draw()
        self.system_state.frames_drawn += 1

    def add_force(self, node_id1, node_id2, force):
        """Attract (positive) or repel (negative) two nodes given by ID."""
        Logger.log(f"start controller add_force(self, {node_id1}, {node_id2}, {force})")
        viewer = self._require_viewer("add a force")
        created = viewer.add_force(self._node(node_id1), self._node(node_id2), force)
        Logger.log("end controller add_force(self, node_id1, node_id2, force)")
        return created

    def add_spring(self, node_id1, node_id2, length):
        """Join two nodes given by ID with an auxiliary spring."""
        Logger.log(f"start controller add_spring(self, {node_id1}, {node_id2}, {length})")
        viewer = self._require_viewer("add a spring")
        created = viewer.add_spring(self._node(node_id1), self._node(node_id2), length)
        Logger.log("end controller add_spring(self, node_id1, node_id2, length)")
        return created

    def set_drag(self, drag):
        """Set particle drag on the attached viewer."""
        if drag < 0:
            raise ValueError("drag must be non-negative")
        self._require_viewer("set drag").set_drag(drag)

    def set_paused(self, paused):
        self._require_viewer("pause").set_paused(paused)

    def is_paused(self):
        return self._require_viewer("pause").is_paused()

    def get_positions(self):
        """Return {node_id: (x, y)}; initial locations when no viewer is attached."""
        network = self._require_network("read positions")
        if self.viewer is None:
            return {node.get_id(): node.get_location() for node in network.get_nodes()}
        return {node.get_id(): position for node, position in self.viewer.get_positions().items()}

    def export(self, data_strategy, image_strategy, folder):
        """Export the current layout; either strategy may be 'none'.

        Returns:
            The folder the export was written to.
        """
        Logger.log(f"start export(self, {data_strategy}, {image_strategy}, {folder})")
        network = self._require_network("export data")
        positions = self.viewer.get_positions() if self.viewer is not None else {}
        export_request = f"export_request {data_strategy} {image_strategy} {folder}"
        export_folder = self.export_manager.handle_export_request(network, positions, export_request)
        Logger.log(f"end export(self, ...) -> {export_folder}")
        return export_folder

    def initiate_view(self, view_strategy):
        """Submit a view request to the view manager."""
        Logger.log(f"start initiate_view(self, {view_strategy})")
        self.view_manager.initiate_view_strategy(view_strategy, self)
        Logger.log(f"end initiate_view(self, view_strategy)")

    def configure_logger(self, enabled, **kwargs):
        """Enable/disable logging and optionally set the storage strategy ('file' or 'memory')."""
        Logger.log(f"start configure_logger(self, {enabled}, {kwargs})")
        if enabled:
            Logger.enable_logging()
        else:
            Logger.disable_logging()

        storage_strategy = kwargs.get("storage_strategy", None)
        if storage_strategy == "file":
            file_location = kwargs.get("file_location", None)
            if not file_location:
                raise ValueError("file_location must be provided for 'file' storage strategy.")
            Logger.set_log_storage_strategy(LocalFileStrategy(file_location))
            Logger.log(f"Logger set to file storage at {file_location}.")
        elif storage_strategy == "memory":
            Logger.set_log_storage_strategy(MemoryStrategy())
            Logger.log("Logger set to memory storage.")
        elif storage_strategy is not None:
            raise ValueError(f"Unknown storage strategy: '{storage_strategy}'")

        minimum_priority = kwargs.get("minimum_priority", None)
        if minimum_priority is not None:
            Logger.set_minimum_priority(minimum_priority)
        Logger.log("end configure_logger(self, enabled, **kwargs)")

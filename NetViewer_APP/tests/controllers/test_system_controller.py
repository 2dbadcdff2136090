"""SystemController: network loading, viewer population and by-ID operations."""

import math
import os

import pytest

from src.controllers.system_controller import SystemController
from src.managers.network.nodes.node_2d import Node2D
from src.managers.network.edges.base_edge import BaseEdge
from src.managers.network.networks.network_2d import Network2D
from src.managers.viewer import physics
from src.models.exceptions import StateTransitionError, NodeNotFoundError


def triangle(meta_data=None):
    nodes = [Node2D({"n_id": i, "n_x": x, "n_y": y}) for i, (x, y) in enumerate([(0, 0), (10, 0), (0, 10)], 1)]
    edges = [BaseEdge({"e_id": 1, "n_from": 1, "n_to": 2}), BaseEdge({"e_id": 2, "n_from": 2, "n_to": 3})]
    return Network2D({"nodes": nodes, "edges": edges, "meta_data": meta_data or {}})


@pytest.fixture
def controller():
    return SystemController()


class TestWithoutNetwork:

    @pytest.mark.parametrize("call", [
        lambda c: c.tick(1),
        lambda c: c.add_force(1, 2, 1.0),
        lambda c: c.add_spring(1, 2, 1.0),
        lambda c: c.set_paused(True),
        lambda c: c.attach_viewer(),
        lambda c: c.get_positions(),
        lambda c: c.export("csv_data_export_strategy", "none", "out"),
    ])
    def test_requires_network(self, controller, call):
        with pytest.raises(StateTransitionError):
            call(controller)

    def test_initial_state(self, controller):
        assert controller.system_state.network_loaded is False
        assert controller.viewer is None


class TestWithNetwork:

    def test_input_network_object(self, controller):
        network = triangle()
        controller.input_network(network)
        assert controller.network is network
        assert controller.system_state.network_loaded
        assert controller.system_state.source == "network"

    def test_input_network_file(self, controller, tmp_path):
        path = tmp_path / "net.csv"
        path.write_text("n_id,n_x,n_y\n1,0,0\n2,5,5\n\ne_id,n_from,n_to\n1,1,2\n")
        controller.input_network(str(path))
        assert len(controller.network.get_nodes()) == 2
        assert controller.system_state.source == str(path)

    def test_generate_network(self, controller):
        controller.generate_network(6, 7, seed=1)
        assert len(controller.network.get_edges()) == 7
        assert controller.system_state.source == "generated"

    def test_attach_viewer_builds_particles_and_springs(self, controller):
        controller.input_network(triangle())
        viewer = controller.attach_viewer()
        assert len(viewer.get_nodes()) == 3
        assert len(viewer.get_edges()) == 2
        assert viewer.attractions == []
        assert controller.system_state.viewer_attached

    def test_attach_viewer_applies_meta_data(self, controller):
        controller.input_network(triangle({"drag": 1.0, "repulsion": 2.0, "spring_length": 30.0}))
        viewer = controller.attach_viewer()
        assert viewer.drag == 1.0
        assert len(viewer.attractions) == 3
        assert all(a.strength == -2.0 for a in viewer.attractions)
        # two edge springs plus one spring for the only unjoined pair (1, 3)
        springs = physics.springs_of(viewer.space)
        assert len(springs) == 3
        extra = [s for s in springs if s.rest_length == 30.0]
        assert len(extra) == 1

    def test_loading_new_network_drops_viewer(self, controller):
        controller.input_network(triangle())
        controller.attach_viewer()
        controller.generate_network(3, 2, seed=0)
        assert controller.viewer is None
        assert not controller.system_state.viewer_attached

    def test_tick_attaches_headless_viewer(self, controller):
        controller.input_network(triangle({"repulsion": 50.0}))
        controller.tick(5)
        assert controller.viewer is not None
        assert controller.system_state.ticks_run == 5
        positions = controller.get_positions()
        assert positions[2] != (10.0, 0.0)

    def test_negative_tick_rejected(self, controller):
        controller.input_network(triangle())
        with pytest.raises(ValueError):
            controller.tick(-1)

    def test_add_force_and_spring_by_id(self, controller):
        controller.input_network(triangle())
        assert controller.add_force(1, 3, 5.0) is True
        assert controller.add_spring(1, 3, 12.0) is True
        assert len(controller.viewer.attractions) == 1

    def test_unknown_node_id(self, controller):
        controller.input_network(triangle())
        with pytest.raises(NodeNotFoundError):
            controller.add_force(1, 42, 1.0)
        with pytest.raises(NodeNotFoundError):
            controller.add_spring(42, 1, 1.0)

    def test_set_drag_and_pause(self, controller):
        controller.input_network(triangle())
        controller.set_drag(3.0)
        assert controller.viewer.drag == 3.0
        with pytest.raises(ValueError):
            controller.set_drag(-1.0)
        controller.set_paused(True)
        assert controller.is_paused()

    def test_positions_before_viewer_are_locations(self, controller):
        controller.input_network(triangle())
        assert controller.get_positions() == {1: (0.0, 0.0), 2: (10.0, 0.0), 3: (0.0, 10.0)}

    def test_draw_frame(self, controller, context, zoomer):
        controller.input_network(triangle())
        controller.attach_viewer(context, zoomer, 400, 300)
        controller.draw_frame()
        assert controller.system_state.frames_drawn == 1
        assert len(context.shapes("ellipse")) == 3
        assert len(context.shapes("line")) == 2

    def test_draw_frame_needs_drawing_context(self, controller):
        controller.generate_network(3, 2, seed=1)
        with pytest.raises(StateTransitionError):
            controller.draw_frame()
        assert controller.viewer is not None
        assert controller.system_state.frames_drawn == 0

    def test_drag_node_in_repelling_network(self, controller, context, zoomer):
        controller.input_network(triangle({"repulsion": 5.0}))
        viewer = controller.attach_viewer(context, zoomer, 400, 300)
        zoomer.mouse = (200.0, 150.0)
        viewer.select_nearest_with_mouse()
        for _ in range(5):
            controller.draw_frame()
        assert all(math.isfinite(v) for xy in controller.get_positions().values() for v in xy)

    def test_export(self, controller, tmp_path):
        controller.input_network(triangle())
        controller.tick(2)
        folder = controller.export("csv_data_export_strategy", "png_image_export_strategy", str(tmp_path))
        assert os.path.isdir(os.path.join(folder, "data_export"))
        assert os.path.isdir(os.path.join(folder, "image_export"))


def test_configure_logger_memory(controller):
    from utils.logger.logger import Logger
    from utils.logger.log_storage_strategy import MemoryStrategy
    controller.configure_logger(True, storage_strategy="memory", minimum_priority="error")
    assert isinstance(Logger.log_storage_strategy, MemoryStrategy)
    assert Logger.minimum_priority == Logger.LogPriority.ERROR
    with pytest.raises(ValueError):
        controller.configure_logger(True, storage_strategy="cloud")


def test_unknown_view(controller):
    with pytest.raises(ValueError):
        controller.initiate_view("web")

"""
Particle viewer for spring-embedded / force-directed network layouts.

Each node is a particle and each edge a spring in a pymunk space. Every
frame the viewer advances the simulation, eases the camera toward the
bounding box of all particles and asks nodes and edges to draw themselves
on a drawing context. A zoom/pan handler sits in front of the camera
transform, and the mouse can pick up the nearest node and drag it around.

Drawing context contract (see SketchCanvas):
    push_matrix(), pop_matrix(), translate(dx, dy), scale(s),
    stroke(*color), no_stroke(), fill(*color), no_fill(),
    get_stroke_weight(), line(...), ellipse(...)

Zoom/pan contract (see ZoomPan):
    transform(context), get_mouse_coord(), is_mouse_captured(), reset()
"""

from typing import Dict, List, Optional, Tuple

import numpy as np
import pymunk

from utils.logger.logger import Logger
from src.config.feature_flags import FeatureFlags
from src.config.viewer_config import ViewerConfig
from src.views.tkinter_view.zoom_pan import ZoomPan
from .attraction import Attraction
from .camera_smoother import CameraSmoother
from . import physics


class ParticleViewer:
    """Allows particles to be viewed and animated."""

    def __init__(self, context, width, height, zoomer=None, config: Optional[ViewerConfig] = None):
        """
        Args:
            context: Drawing context the viewer draws into.
            width: Width of the drawable area in pixels.
            height: Height of the drawable area in pixels.
            zoomer: Zoom/pan handler. A Shift-masked ZoomPan is created when omitted.
            config: Physics, camera and style settings (defaults when omitted).
        """
        Logger.log(f"start ParticleViewer __init__(self, width={width}, height={height})")
        self.config = config or ViewerConfig()
        phys = self.config.physics

        self.context = context
        self.width = width
        self.height = height

        if zoomer is None:
            zoomer = ZoomPan(camera=self.config.camera)
        self.zoomer = zoomer

        self.centroid = CameraSmoother(self.config.camera.smoothness)
        self.space = pymunk.Space()
        self.space.gravity = (0, 0)
        self.drag = phys.drag
        self.space.damping = physics.drag_to_damping(phys.drag)

        self.nodes: Dict[object, pymunk.Body] = {}
        self.edges: Dict[object, pymunk.DampedSpring] = {}
        self.attractions: List[Attraction] = []
        self.paused = False
        self.selected_node = None
        Logger.log(f"end ParticleViewer __init__(self)")

    # ---------------------------------- Frame ----------------------------------

    def draw(self):
        """
        Update and draw one frame. Call this once per animation frame; use
        update_particles() to advance the layout without drawing.
        """
        ctx = self.context
        style = self.config.style

        ctx.push_matrix()
        try:
            self.zoomer.transform(ctx)
            if FeatureFlags.AUTO_CENTRE:
                self._update_centroid()
            self.centroid.tick()

            ctx.translate(self.width / 2, self.height / 2)
            ctx.scale(self.centroid.z())
            ctx.translate(-self.centroid.x(), -self.centroid.y())

            if not self.paused:
                self.update_particles()

            # Keep the selected node under the mouse.
            if self.selected_node is not None:
                body = self.nodes[self.selected_node]
                physics.make_fixed(body)
                body.position = self.screen_to_world(*self.zoomer.get_mouse_coord())

            if FeatureFlags.DRAW_EDGES and ctx.get_stroke_weight() > 0:
                ctx.stroke(*style.edge_stroke)
                ctx.no_fill()
                for edge, spring in self.edges.items():
                    p1 = spring.a.position
                    p2 = spring.b.position
                    edge.draw(ctx, p1.x, p1.y, p2.x, p2.y)

            ctx.no_stroke()
            ctx.fill(*style.node_fill)
            for node, body in self.nodes.items():
                if node is self.selected_node:
                    continue
                node.draw(ctx, body.position.x, body.position.y, style.node_diameter)
            if self.selected_node is not None:
                body = self.nodes[self.selected_node]
                ctx.fill(*style.selected_fill)
                self.selected_node.draw(ctx, body.position.x, body.position.y, style.node_diameter)
        finally:
            ctx.pop_matrix()

    def update_particles(self):
        """
        Advance the physics by one time step. draw() already does this each
        frame; calling it more often speeds up the layout.
        """
        for attraction in self.attractions:
            attraction.apply()
        self.space.step(self.config.physics.time_step)

    # --------------------------------- Settings --------------------------------

    def set_drag(self, drag):
        """
        Set the drag on all particles (larger values slow movement down).
        Default is 0.75, enough for particles to move smoothly.
        """
        self.space.damping = physics.drag_to_damping(drag)
        self.drag = drag
        Logger.log(f"Drag set to {drag}")

    def set_paused(self, paused):
        self.paused = bool(paused)
        Logger.log(f"Viewer {'paused' if self.paused else 'resumed'}")

    def is_paused(self):
        return self.paused

    def toggle_paused(self):
        self.set_paused(not self.paused)
        return self.paused

    # ------------------------------ Forces and springs ------------------------------

    def add_force(self, node1, node2, force) -> bool:
        """
        Create an attractive (positive) or repulsive (negative) force between
        two nodes, replacing any force already between them.

        Returns:
            True if both nodes are in the viewer and the force was created.
        """
        p1 = self.nodes.get(node1)
        if p1 is None:
            return False
        p2 = self.nodes.get(node2)
        if p2 is None:
            return False

        for attraction in self.attractions:
            if attraction.connects(p1, p2):
                self.attractions.remove(attraction)
                break

        self.attractions.append(
            Attraction(p1, p2, force, self.config.physics.attraction_min_distance,
                       self.config.physics.particle_mass)
        )
        return True

    def add_spring(self, node1, node2, length) -> bool:
        """
        Create a spring of the given rest length between two nodes. A previous
        auxiliary spring between them is replaced; edge springs are kept. The
        spring is weaker than edge springs.

        Returns:
            True if both nodes are in the viewer and the spring was created.
        """
        p1 = self.nodes.get(node1)
        if p1 is None:
            return False
        p2 = self.nodes.get(node2)
        if p2 is None:
            return False

        phys = self.config.physics
        for spring in physics.springs_of(self.space):
            if physics.connects(spring.a, spring.b, p1, p2) and spring.stiffness != phys.edge_strength:
                self.space.remove(spring)
                break

        physics.make_spring(self.space, p1, p2, phys.spring_strength, phys.damping, length)
        return True

    # ------------------------------- Nodes and edges -------------------------------

    def add_node(self, node):
        """Add a node, as a particle at the node's location."""
        if node in self.nodes:
            Logger.log(f"Node {node.get_id()} already in viewer; ignored.", Logger.LogPriority.WARNING)
            return
        x, y = node.get_location()
        self.nodes[node] = physics.make_particle(self.space, self.config.physics.particle_mass, x, y)

    def add_edge(self, edge) -> bool:
        """
        Add an edge between two nodes already in the viewer. Its spring rests
        at the current distance between the two particles.

        Returns:
            False if either node has not been added to the viewer.
        """
        p1 = self.nodes.get(edge.get_node1())
        if p1 is None:
            Logger.log("Warning: Node1 not found when creating edge.", Logger.LogPriority.WARNING)
            return False
        p2 = self.nodes.get(edge.get_node2())
        if p2 is None:
            Logger.log("Warning: Node2 not found when creating edge.", Logger.LogPriority.WARNING)
            return False

        if edge not in self.edges:
            phys = self.config.physics
            self.edges[edge] = physics.make_spring(
                self.space, p1, p2, phys.edge_strength, phys.damping, physics.distance(p1, p2)
            )
        return True

    def clear(self):
        """Remove every particle, spring and force."""
        self.space.remove(*self.space.constraints)
        self.space.remove(*self.space.bodies)
        self.nodes = {}
        self.edges = {}
        self.attractions = []
        self.selected_node = None
        Logger.log("Viewer cleared")

    # ---------------------------------- Mouse ----------------------------------

    def screen_to_world(self, mouse_x, mouse_y) -> Tuple[float, float]:
        """Map a (zoom/pan corrected) mouse position to simulation coordinates."""
        z = self.centroid.z()
        return ((mouse_x - self.width / 2) / z + self.centroid.x(),
                (mouse_y - self.height / 2) / z + self.centroid.y())

    def select_nearest_with_mouse(self):
        """Select the node nearest the mouse, unless one is already selected."""
        if self.zoomer.is_mouse_captured():
            return
        if self.selected_node is not None or not self.nodes:
            return

        m_x, m_y = self.screen_to_world(*self.zoomer.get_mouse_coord())
        nodes = list(self.nodes)
        positions = np.array([tuple(self.nodes[n].position) for n in nodes], dtype=float)
        d_sq = (positions[:, 0] - m_x) ** 2 + (positions[:, 1] - m_y) ** 2
        self.selected_node = nodes[int(np.argmin(d_sq))]
        Logger.log(f"Node {self.selected_node.get_id()} selected")

    def drop_selected(self):
        """Release the mouse-selected node so it settles with the rest of the layout."""
        if self.zoomer.is_mouse_captured():
            return
        if self.selected_node is not None:
            physics.make_free(self.nodes[self.selected_node], self.config.physics.particle_mass)
            Logger.log(f"Node {self.selected_node.get_id()} dropped")
            self.selected_node = None

    def reset_view(self):
        """Reset the zoomed view to show the entire network."""
        self.zoomer.reset()

    # --------------------------------- Queries ---------------------------------

    def get_selected_node(self):
        return self.selected_node

    def get_particle(self, node):
        return self.nodes.get(node)

    def get_spring(self, edge):
        return self.edges.get(edge)

    def get_nodes(self):
        return list(self.nodes)

    def get_edges(self):
        return list(self.edges)

    def get_positions(self):
        """Return {node: (x, y)} of current particle positions."""
        return {node: (body.position.x, body.position.y) for node, body in self.nodes.items()}

    # ------------------------------ Private methods ------------------------------

    def _update_centroid(self):
        """Aim the camera at the bounding box of all particles."""
        bodies = self.space.bodies
        if not bodies:
            return
        positions = np.array([tuple(b.position) for b in bodies], dtype=float)
        x_min, y_min = positions.min(axis=0)
        x_max, y_max = positions.max(axis=0)
        x_range = x_max - x_min
        y_range = y_max - y_min
        padding = self.config.camera.view_padding

        scales = []
        if y_range > 0:
            scales.append(self.height / (y_range * padding))
        if x_range > 0:
            scales.append(self.width / (x_range * padding))
        z_scale = min(scales) if scales else self.centroid.target()[2]

        self.centroid.set_target(x_min + 0.5 * x_range, y_min + 0.5 * y_range, z_scale)

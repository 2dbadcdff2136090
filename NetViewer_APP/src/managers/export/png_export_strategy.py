import io
from PIL import Image, ImageDraw
from utils.logger.logger import Logger
from .image_export_strategy import ImageExportStrategy

class PngExportStrategy(ImageExportStrategy):
    """Render the current layout to a PNG."""

    def __init__(self, size=(800, 600), padding=40, node_radius=5,
                 node_color=(120, 50, 50), edge_color=(80, 80, 80), background="white"):
        self.size = size
        self.padding = padding
        self.node_radius = node_radius
        self.node_color = node_color
        self.edge_color = edge_color
        self.background = background

    def generate_export(self, network, positions):
        img = self.create_image(network, positions)
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        Logger.log("PNG export generated")
        return [("network_layout.png", buffer.getvalue())]

    def create_image(self, network, positions):
        """Draw edges then nodes, fitted to the image."""
        img = Image.new("RGB", self.size, self.background)
        nodes = network.get_nodes()
        if not nodes:
            return img

        points = {node: positions.get(node, node.get_location()) for node in nodes}
        to_pixel = self.fit(list(points.values()), self.size, self.padding)
        draw = ImageDraw.Draw(img)

        for edge in network.get_edges():
            p1 = points.get(edge.get_node1())
            p2 = points.get(edge.get_node2())
            if p1 is None or p2 is None:
                continue
            draw.line((*to_pixel(*p1), *to_pixel(*p2)), fill=self.edge_color, width=2)

        r = self.node_radius
        for x, y in points.values():
            px, py = to_pixel(x, y)
            draw.ellipse([px - r, py - r, px + r, py + r], fill=self.node_color, outline=self.node_color)
        return img

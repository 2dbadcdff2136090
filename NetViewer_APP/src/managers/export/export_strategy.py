class ExportStrategy():
    """Turns the current layout into files."""

    def generate_export(self, network, positions):
        """Return a list[(filename, bytes)] for this export.

        Args:
            network: The loaded Network2D.
            positions: {node: (x, y)} current particle positions.
        """
        raise NotImplementedError()

    @staticmethod
    def node_rows(network, positions):
        """Node attribute rows with the location replaced by the current position."""
        rows = []
        for node in network.get_nodes():
            row = node.get_attributes()
            x, y = positions.get(node, node.get_location())
            row["n_x"] = float(x)
            row["n_y"] = float(y)
            rows.append(row)
        return rows

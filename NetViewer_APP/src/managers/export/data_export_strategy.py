import time
import pandas as pd
from .export_strategy import ExportStrategy

class DataExportStrategy(ExportStrategy):
    """Base for tabular exports that can be read back by the input strategies."""

    def frames(self, network, positions):
        """Return (nodes_df, edges_df, meta_df)."""
        nodes_df = pd.DataFrame(self.node_rows(network, positions), columns=["n_id", "n_x", "n_y"])
        edges_df = pd.DataFrame([edge.get_attributes() for edge in network.get_edges()],
                                columns=["e_id", "n_from", "n_to"])
        meta_df = pd.DataFrame(list(network.get_meta_data().items()), columns=["meta_key", "meta_value"])
        return nodes_df, edges_df, meta_df

    @staticmethod
    def file_name(extension):
        return f"network_layout_{time.strftime('%Y%m%d_%H%M%S')}.{extension}"

from utils.logger.logger import Logger
from .data_export_strategy import DataExportStrategy

class CsvExportStrategy(DataExportStrategy):
    def generate_export(self, network, positions):
        """Write nodes, edges and metadata as CSV tables separated by empty lines."""
        Logger.log("Starting CSV export generation")
        nodes_df, edges_df, meta_df = self.frames(network, positions)
        parts = [nodes_df.to_csv(index=False), edges_df.to_csv(index=False)]
        if not meta_df.empty:
            parts.append(meta_df.to_csv(index=False))
        file_name = self.file_name("csv")
        Logger.log(f"CSV export generated: {file_name}")
        return [(file_name, "\n".join(parts).encode("utf-8"))]

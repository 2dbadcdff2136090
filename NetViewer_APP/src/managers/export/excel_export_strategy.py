from io import BytesIO
import pandas as pd
from utils.logger.logger import Logger
from .data_export_strategy import DataExportStrategy

class ExcelExportStrategy(DataExportStrategy):
    def generate_export(self, network, positions):
        """Write nodes (at current positions), edges and metadata to one sheet."""
        Logger.log("Starting Excel export generation")
        nodes_df, edges_df, meta_df = self.frames(network, positions)

        buffer = BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            start_row = 0
            frames = [nodes_df, edges_df] + ([] if meta_df.empty else [meta_df])
            for frame in frames:
                frame.to_excel(writer, index=False, startrow=start_row, sheet_name="Sheet1")
                # header + rows + one blank separator row
                start_row += len(frame) + 2

        file_name = self.file_name("xlsx")
        Logger.log(f"Excel export generated: {file_name}")
        return [(file_name, buffer.getvalue())]

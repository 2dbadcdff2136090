import pandas as pd
from utils.logger.logger import Logger
from .data_processing_strategy import DataProcessingStrategy

class CsvDataStrategy(DataProcessingStrategy):
    """Parse a .csv file (tables separated by empty lines) into a `Network2D`."""

    # Tables have different widths; shorter rows are padded with NaN.
    MAX_COLUMNS = 32

    def read_frame(self, input_data):
        Logger.log(f"Reading CSV file {input_data}")
        df = pd.read_csv(input_data, header=None, names=list(range(self.MAX_COLUMNS)),
                         skip_blank_lines=False)
        if df.empty:
            raise ValueError("file holds no rows")
        return df.dropna(axis=1, how="all")

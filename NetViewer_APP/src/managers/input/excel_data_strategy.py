import pandas as pd
from utils.logger.logger import Logger
from .data_processing_strategy import DataProcessingStrategy

class ExcelDataStrategy(DataProcessingStrategy):
    """Parse the first sheet of an .xlsx workbook into a `Network2D`."""

    def read_frame(self, input_data):
        Logger.log(f"Reading Excel file {input_data}")
        return pd.read_excel(input_data, header=None)

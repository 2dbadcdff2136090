from utils.logger.logger import Logger
from ...models.exceptions import UnsupportedFileTypeError
from .excel_data_strategy import ExcelDataStrategy
from .csv_data_strategy import CsvDataStrategy
import os

class InputDataInterpreter:
    """Pick a data processing strategy based on file type."""

    STRATEGIES = {
        ".xlsx": ExcelDataStrategy,
        ".csv": CsvDataStrategy,
    }

    def get_data_processing_strategy(self, input_data):
        """Return a strategy for `input_data` path."""
        Logger.log(f"start get_data_processing_strategy(self, {input_data})")
        if not os.path.exists(input_data):
            Logger.log(f"input file not found: {input_data}", Logger.LogPriority.ERROR)
            raise FileNotFoundError(f"Input file not found: {input_data}")

        file_extension = os.path.splitext(input_data)[1].lower()
        Logger.log(f"File details - Name: {os.path.basename(input_data)}, "
                   f"Size: {os.path.getsize(input_data)} bytes, Extension: {file_extension}")

        strategy_class = self.STRATEGIES.get(file_extension)
        if strategy_class is None:
            Logger.log(f"unsupported file type: {file_extension}", Logger.LogPriority.ERROR)
            raise UnsupportedFileTypeError(f"Unsupported file type: {file_extension}")
        return strategy_class()

from .excel_export_strategy import ExcelExportStrategy
from .csv_export_strategy import CsvExportStrategy
from .png_export_strategy import PngExportStrategy
from utils.logger.logger import Logger

class ExportRequestInterpreter:
    """Parse export requests and instantiate strategies."""

    VALID_DATA_STRATEGIES = {
        "excel_data_export_strategy": ExcelExportStrategy,
        "csv_data_export_strategy": CsvExportStrategy,
    }

    VALID_IMAGE_STRATEGIES = {
        "png_image_export_strategy": PngExportStrategy
    }

    def parse_request(self, request_str: str):
        """Return dict with strategies and folder from
        'export_request <data_strategy|none> <image_strategy|none> <folder>'."""
        Logger.log(f"start parse_request(self, {request_str})")
        request_str = request_str.strip()
        if not request_str.startswith("export_request"):
            raise ValueError("The request must start with 'export_request'")
        parts = request_str[len("export_request"):].strip().split(maxsplit=2)

        if len(parts) != 3:
            Logger.log(f"Invalid number of parts in the request, expected 3 but got {len(parts)}", Logger.LogPriority.ERROR)
            raise ValueError("Request must consist of exactly 3 parts: data, image, folder.")

        data_name, image_name, folder_location = (None if p.lower() == "none" else p for p in parts)

        if data_name is None and image_name is None:
            raise ValueError("At least one of 'data_export_strategy' or 'image_export_strategy' must be provided.")
        if folder_location is None:
            raise ValueError("Folder location cannot be 'none'.")

        data_export_strategy = None
        if data_name:
            if data_name not in self.VALID_DATA_STRATEGIES:
                Logger.log(f"Invalid data export strategy: {data_name}", Logger.LogPriority.ERROR)
                raise ValueError(f"Invalid data export strategy: '{data_name}'.")
            data_export_strategy = self.VALID_DATA_STRATEGIES[data_name]()

        image_export_strategy = None
        if image_name:
            if image_name not in self.VALID_IMAGE_STRATEGIES:
                Logger.log(f"Invalid image export strategy: {image_name}", Logger.LogPriority.ERROR)
                raise ValueError(f"Invalid image export strategy: '{image_name}'.")
            image_export_strategy = self.VALID_IMAGE_STRATEGIES[image_name]()

        return {
            'data_export_strategy': data_export_strategy,
            'image_export_strategy': image_export_strategy,
            'folder_location': folder_location
        }

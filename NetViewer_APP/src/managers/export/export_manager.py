import os
from datetime import datetime
from .export_request_interpreter import ExportRequestInterpreter
from utils.logger.logger import Logger

class ExportManager:
    def __init__(self):
        self.interpreter = ExportRequestInterpreter()

    def handle_export_request(self, network, positions, export_request):
        """Parse request, run strategies, and save outputs.

        Returns:
            The timestamped folder the files were written to.
        """
        try:
            request = self.interpreter.parse_request(export_request)
            base_folder_location = request['folder_location']
            self._verify_folder(base_folder_location)

            outputs = {}
            if request['data_export_strategy']:
                outputs['data_export'] = request['data_export_strategy'].generate_export(network, positions)
            if request['image_export_strategy']:
                outputs['image_export'] = request['image_export_strategy'].generate_export(network, positions)

            return self._save_reports(outputs, base_folder_location)
        except Exception as ex:
            Logger.log(f"Error handling export request: {ex}", Logger.LogPriority.ERROR)
            raise

    def _save_reports(self, outputs, base_folder_location):
        """Save generated files into data/image subfolders of a timestamped folder."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        root_folder = os.path.join(base_folder_location, f"export_{timestamp}")
        os.makedirs(root_folder, exist_ok=True)
        Logger.log(f"Created root folder: {root_folder}")

        for sub_folder, files in outputs.items():
            if not files:
                continue
            folder_location = os.path.join(root_folder, sub_folder)
            os.makedirs(folder_location, exist_ok=True)
            for filename, content in files:
                file_path = os.path.join(folder_location, filename)
                with open(file_path, 'wb') as f:
                    f.write(content)
                Logger.log(f"Saved file: {file_path}")
        return root_folder

    def _verify_folder(self, folder_path):
        """Ensure base folder exists and is a directory."""
        if not os.path.exists(folder_path):
            os.makedirs(folder_path)
            Logger.log(f"Created folder: {folder_path}")
        elif not os.path.isdir(folder_path):
            Logger.log(f"{folder_path} exists but is not a directory.", Logger.LogPriority.ERROR)
            raise ValueError(f"{folder_path} exists but is not a directory.")

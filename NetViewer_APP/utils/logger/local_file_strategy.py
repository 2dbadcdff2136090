from .log_storage_strategy import LogStorageStrategy
import os
from datetime import datetime

class LocalFileStrategy(LogStorageStrategy):
    """
    Writes log entries to a text file, one line per entry.
    """

    def __init__(self, file_location, keep_existing=False):
        """
        Args:
            file_location (str): Log file path, relative paths resolve against the working directory.
            keep_existing (bool): Append to an existing file instead of truncating it.
        """
        self.file_location = self.resolve_file_path(file_location)
        if keep_existing and os.path.exists(self.file_location):
            self._write("a", f"LOG REOPENED: {datetime.now()}\n")
        else:
            self._write("w", f"LOG INITIALIZATION: {datetime.now()}\n")

    @staticmethod
    def resolve_file_path(file_location):
        """Return an absolute path, creating the parent folder when missing."""
        file_location = os.path.abspath(file_location)
        os.makedirs(os.path.dirname(file_location), exist_ok=True)
        return file_location

    def _write(self, mode, text):
        with open(self.file_location, mode, encoding="utf-8") as log_file:
            log_file.write(text)

    def store_log(self, message, priority, timestamp):
        self._write("a", f"[{timestamp}] [{priority}] {message}\n")

    def flush_logs(self):
        """Truncate the file, leaving a single marker line."""
        self._write("w", f"LOG FLUSHED: {datetime.now()}\n")

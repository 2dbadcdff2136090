class LogStorageStrategy:
    """
    Abstract base class for log storage strategies.
    This class defines the interface for storing and flushing logs.
    """
    # STORE LOG WITH MESSAGE PRIORITY AND TIMESTAMP
    def store_log(self, message, priority, timestamp):
        """
        Stores a log message with the given priority and timestamp.
        
        Parameters:
        message (str): The log message to be stored.
        priority (str): Name of the priority level of the log.
        timestamp (str): The timestamp of the log message.
        
        Raises:
        NotImplementedError: If this method is not overridden in a subclass.
        """
        raise NotImplementedError()
    
    # FLUSHES ALL STORED LOGS
    def flush_logs(self):
        """
        Flushes all stored logs.
        
        Raises:
        NotImplementedError: If this method is not overridden in a subclass.
        """
        raise NotImplementedError()


class MemoryStrategy(LogStorageStrategy):
    """
    Keeps log entries in a list. Used by the CLI `configure_logger memory`
    command and by tests that need to inspect what was logged.
    """

    def __init__(self):
        self.entries = []

    def store_log(self, message, priority, timestamp):
        self.entries.append((timestamp, priority, str(message)))

    def flush_logs(self):
        self.entries = []

    def messages(self, priority=None):
        """Return logged messages, optionally only those with the given priority name."""
        return [m for _, p, m in self.entries if priority is None or p == priority]

class StateTransitionError(Exception):
    """Operation not allowed in the current system state."""
    def __init__(self, message="Invalid state transition attempted."):
        super().__init__(message)
    
class InvalidInputDataError(Exception):
    """Input file content failed validation."""
    def __init__(self, message="Unable to validate input data."):
        super().__init__(message)

class UnsupportedFileTypeError(Exception):
    """Unsupported input file type."""
    def __init__(self, message="File type not supported."):
        super().__init__(message)

class NodeNotFoundError(Exception):
    """Node ID not found in the network."""
    def __init__(self, message="Node ID not found in network."):
        super().__init__(message)

class InvalidConfigError(ValueError):
    """Viewer configuration failed validation."""
    def __init__(self, message="Invalid viewer configuration."):
        super().__init__(message)

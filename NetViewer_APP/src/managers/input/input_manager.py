from utils.logger.logger import Logger
from .input_data_interpreter import InputDataInterpreter

class InputManager:
    """Coordinate reading input data into a network."""
    
    def __init__(self):
        """Initialize interpreter."""
        self.data_interpreter = InputDataInterpreter()

    def get_network(self, input_data):
        """Return a `Network2D` parsed from `input_data` path.

        Raises:
            FileNotFoundError, UnsupportedFileTypeError, InvalidInputDataError
        """
        Logger.log(f"start get_network(self, {input_data})")
        strategy = self.data_interpreter.get_data_processing_strategy(input_data)
        network = strategy.process(input_data)
        Logger.log(f"end get_network(self, input_data)")
        return network

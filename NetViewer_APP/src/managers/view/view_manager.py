from src.managers.view.view_request_interpreter import ViewRequestInterpreter
from utils.logger.logger import Logger

# MANAGES VIEW REQUESTS AND CONTROLS VIEW STRATEGY
class ViewManager:
    """Selects, starts and swaps the active view strategy."""

    def __init__(self, controller):
        """
        Args:
            controller: The SystemController the views will drive.
        """
        Logger.log(f"start ViewManager __init__(self, controller)")
        self.controller = controller
        self.view_request_interpreter = ViewRequestInterpreter()
        self.view_strategy = None
        Logger.log(f"end ViewManager __init__(self, controller)")

    def initiate_view_strategy(self, view, controller=None):
        """
        Stop the current view (if any) and start the requested one.

        Args:
            view (str): "cli" or "tkinter".
            controller: Controller for the new view; defaults to the manager's controller.

        Raises:
            ValueError: If the view request is invalid.
        """
        Logger.log(f"start initiate_view_strategy(self, {view})")
        new_view_strategy = self.view_request_interpreter.get_view_strategy(view, controller or self.controller)
        Logger.log(f"Selected view strategy: {type(new_view_strategy).__name__}")

        # STOPS CURRENT VIEW STRATEGY IF ACTIVE
        if self.view_strategy:
            Logger.log("Stopping current view strategy before switching.")
            self.view_strategy.stop_view()

        self.view_strategy = new_view_strategy
        self.view_strategy.start_view()
        Logger.log(f"end initiate_view_strategy(self, view)")

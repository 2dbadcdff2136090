from src.views.cli_view.cli_view import CommandLineView
from src.views.tkinter_view.optional_gui_loader import get_gui_view_class
from utils.logger.logger import Logger

# INTERPRETS VIEW REQUESTS AND RETURNS APPROPRIATE VIEW STRATEGY
class ViewRequestInterpreter:
    """
    Maps a view name ("cli" or "tkinter") to a view strategy instance.
    """

    def get_view_strategy(self, view_request, controller):
        """
        Args:
            view_request (str): "cli" or "tkinter", case-insensitive.
            controller: The SystemController the view will drive.

        Returns:
            CommandLineView or TkinterView bound to `controller`.

        Raises:
            ValueError: If the request is unknown or tkinter cannot be loaded.
        """
        Logger.log(f"start get_view_strategy(self, {view_request}, controller)")
        request = view_request.strip().lower()

        if request == "cli":
            Logger.log("CLI view strategy selected.")
            return CommandLineView(controller)

        if request == "tkinter":
            view_class = get_gui_view_class()
            if view_class is None:
                Logger.log("ValueError: Tkinter view is not available.", Logger.LogPriority.ERROR)
                raise ValueError("Tkinter view is not available on this system.")
            Logger.log("Tkinter view strategy selected.")
            return view_class(controller)

        Logger.log(f"ValueError: Invalid view request '{view_request}'.", Logger.LogPriority.ERROR)
        raise ValueError("Invalid view request. Choose 'cli' or 'tkinter'.")

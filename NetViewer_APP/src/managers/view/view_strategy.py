from utils.logger.logger import Logger

class ViewStrategy():
    """
    Base class for the front ends of the viewer (terminal or window).
    Subclasses drive the controller and decide how the layout is shown.
    """

    def __init__(self, controller):
        """
        Parameters:
        controller (SystemController): The controller the view sends requests to.
        """
        Logger.log(f"start ViewStrategy __init__(self, {controller})")
        self.controller = controller
        Logger.log(f"end ViewStrategy __init__(self, controller)")

    # STARTS THE VIEW, BLOCKING UNTIL IT IS CLOSED
    def start_view(self):
        """
        Raises:
        NotImplementedError: If not implemented in a subclass.
        """
        raise NotImplementedError()

    # STOPS THE VIEW AND RELEASES ITS RESOURCES
    def stop_view(self):
        """
        Raises:
        NotImplementedError: If not implemented in a subclass.
        """
        raise NotImplementedError()

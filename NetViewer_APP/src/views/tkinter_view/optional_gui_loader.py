from utils.logger.logger import Logger

def get_gui_view_class():
    """Return the TkinterView class, or None when tkinter cannot be imported."""
    try:
        from src.views.tkinter_view.tkinter_view import TkinterView
    except ImportError as e:
        Logger.log(f"Tkinter not available: {e}", Logger.LogPriority.WARNING)
        return None
    Logger.log("TkinterView successfully loaded.", Logger.LogPriority.DEBUG)
    return TkinterView

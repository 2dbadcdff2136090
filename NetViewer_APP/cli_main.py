from src.controllers.system_controller import SystemController
from src.config.viewer_config import load_config
from utils.logger.logger import Logger
import sys

def main(argv=None):
    """
    Entry point to the NetViewer CLI Application.

    An optional first argument names a YAML config file.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        # CONFIGURES LOGGER WITH DEFAULT FILE STORAGE
        Logger.initialize()
        Logger.log("NetViewer CLI starting...")

        controller = SystemController(load_config(argv[0] if argv else None))
        Logger.log("System controller initialized successfully")

        controller.initiate_view("cli")

    except KeyboardInterrupt:
        print("\n>>> Application interrupted by user")
        sys.exit(0)
    except Exception as ex:
        print(f">>> Fatal error: {ex}")
        Logger.log(f"Fatal error in CLI main: {ex}", Logger.LogPriority.ERROR)
        sys.exit(1)

if __name__ == "__main__":
    main()

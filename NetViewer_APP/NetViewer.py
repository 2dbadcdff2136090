import argparse
import sys
from src.controllers.system_controller import SystemController
from src.config.viewer_config import load_config
from src.models.exceptions import InvalidInputDataError, UnsupportedFileTypeError
from utils.logger.logger import Logger


def build_parser():
    parser = argparse.ArgumentParser(description="Animate a network with a spring-embedder layout.")
    parser.add_argument("network", nargs="?", help="Network file to open (.xlsx or .csv)")
    parser.add_argument("--config", help="YAML file with physics, camera and style settings")
    parser.add_argument("--generate", nargs=2, type=int, metavar=("N_NODES", "N_EDGES"),
                        help="Open a random network instead of a file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --generate")
    parser.add_argument("--log-level", default="info", help="Minimum log priority (debug, info, warning, error)")
    return parser


def main(argv=None):
    """NetViewer application entry point."""
    args = build_parser().parse_args(argv)
    Logger.initialize()
    try:
        Logger.set_minimum_priority(args.log_level)
        controller = SystemController(load_config(args.config))
        if args.generate:
            controller.generate_network(*args.generate, seed=args.seed)
        elif args.network:
            controller.input_network(args.network)
        controller.initiate_view("tkinter")
    except KeyboardInterrupt:
        sys.exit(0)
    except (ValueError, OSError, InvalidInputDataError, UnsupportedFileTypeError) as ex:
        print(f">>> Fatal error: {ex}")
        Logger.log(f"Fatal error in NetViewer main: {ex}", Logger.LogPriority.ERROR)
        sys.exit(1)

if __name__ == "__main__":
    main()

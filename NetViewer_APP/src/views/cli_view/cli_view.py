from src.managers.view.view_strategy import ViewStrategy
from src.models.exceptions import (StateTransitionError, UnsupportedFileTypeError,
                                   InvalidInputDataError, NodeNotFoundError)
from src.config.feature_flags import FeatureFlags
from utils.logger.logger import Logger
import os
import platform
import shlex
from typing import List

class CommandLineView(ViewStrategy):
    """Command-line interface for running layouts without a window."""

    def __init__(self, controller):
        super().__init__(controller)
        self.running = True
        self.command_history = []
        self.max_history = 50

        # Command catalog
        self.commands = {
            'help': {
                'description': 'Show available commands and their usage',
                'usage': 'help [command]',
                'args': 'optional',
                'examples': ['help', 'help tick']
            },
            'exit': {
                'description': 'Exit the CLI',
                'usage': 'exit',
                'args': 'none',
                'examples': ['exit']
            },
            'quit': {
                'description': 'Exit the CLI',
                'usage': 'quit',
                'args': 'none',
                'examples': ['quit']
            },
            'clear': {
                'description': 'Clear the terminal screen',
                'usage': 'clear',
                'args': 'none',
                'examples': ['clear']
            },
            'status': {
                'description': 'Show current system status and network information',
                'usage': 'status',
                'args': 'none',
                'examples': ['status']
            },
            'input_network': {
                'description': 'Load a network from an Excel or CSV file',
                'usage': 'input_network <file_path>',
                'args': 'required',
                'examples': ['input_network networks/ring.xlsx', 'input_network networks/ring.csv']
            },
            'generate': {
                'description': 'Generate a random network',
                'usage': 'generate <n_nodes> <n_edges> [seed]',
                'args': 'required',
                'examples': ['generate 20 30', 'generate 50 80 7']
            },
            'tick': {
                'description': 'Advance the layout by a number of physics steps',
                'usage': 'tick [steps]',
                'args': 'optional',
                'examples': ['tick', 'tick 500']
            },
            'add_force': {
                'description': 'Attract (positive) or repel (negative) two nodes',
                'usage': 'add_force <node_id> <node_id> <strength>',
                'args': 'required',
                'examples': ['add_force 1 2 -5', 'add_force 3 4 2.5']
            },
            'add_spring': {
                'description': 'Join two nodes with a weak spring of the given rest length',
                'usage': 'add_spring <node_id> <node_id> <length>',
                'args': 'required',
                'examples': ['add_spring 1 5 40']
            },
            'set_drag': {
                'description': 'Set the drag on all particles',
                'usage': 'set_drag <drag>',
                'args': 'required',
                'examples': ['set_drag 0.75', 'set_drag 2']
            },
            'pause': {
                'description': 'Pause or resume the simulation',
                'usage': 'pause [on|off]',
                'args': 'optional',
                'examples': ['pause', 'pause off']
            },
            'flags': {
                'description': 'Show or toggle feature flags',
                'usage': 'flags [draw_edges|auto_centre]',
                'args': 'optional',
                'examples': ['flags', 'flags auto_centre']
            },
            'positions': {
                'description': 'Print current node positions',
                'usage': 'positions [limit]',
                'args': 'optional',
                'examples': ['positions', 'positions 10']
            },
            'export': {
                'description': 'Export the current layout as data and/or an image',
                'usage': 'export <data_strategy> <image_strategy> <folder_path>',
                'args': 'required',
                'examples': ['export excel_data_export_strategy none ./exports',
                             'export csv_data_export_strategy png_image_export_strategy ./exports']
            },
            'configure_logger': {
                'description': 'Configure logging settings',
                'usage': 'configure_logger <enable|disable|level> [file_location|priority]',
                'args': 'required',
                'examples': ['configure_logger enable', 'configure_logger enable ./logs.txt',
                             'configure_logger level warning']
            },
            'switch_view': {
                'description': 'Switch to a different view (e.g., GUI)',
                'usage': 'switch_view <view_type>',
                'args': 'required',
                'examples': ['switch_view tkinter']
            },
            'history': {
                'description': 'Show command history',
                'usage': 'history [number]',
                'args': 'optional',
                'examples': ['history', 'history 10']
            },
        }

    def clear_view(self):
        """Clear the terminal screen."""
        Logger.log("start clear_view()")
        if platform.system() == 'Windows':
            os.system('cls')
        else:
            os.system('clear')
        Logger.log("end clear_view()")

    def start_view(self):
        """Start the CLI."""
        Logger.log("start start_view()")
        self.clear_view()
        self._print_welcome()
        self.run()
        Logger.log("end start_view()")

    def stop_view(self):
        """Stop the CLI."""
        Logger.log("start stop_view()")
        self.running = False
        print("\n>>> NetViewer CLI stopped. Goodbye!\n")
        Logger.log("end stop_view()")

    def _print_welcome(self):
        """Print welcome message."""
        print("=" * 60)
        print("           NETVIEWER COMMAND LINE INTERFACE")
        print("=" * 60)
        print("Force-directed network layout")
        print("Type 'help' to see available commands")
        print("Type 'exit' or 'quit' to exit")
        print("=" * 60)

    def run(self):
        """Main command loop."""
        Logger.log("start run()")
        while self.running:
            try:
                command = input("\nNetViewer> ").strip()
                if not command:
                    continue
                self._add_to_history(command)
                self._process_command(command)
            except KeyboardInterrupt:
                print("\n>>> Use 'exit' or 'quit' to exit the application.")
            except EOFError:
                print("\n>>> End of input. Exiting...")
                self.stop_view()
                break
        Logger.log("end run()")

    def _add_to_history(self, command: str):
        """Track command history."""
        self.command_history.append(command)
        if len(self.command_history) > self.max_history:
            self.command_history.pop(0)

    def _process_command(self, command: str):
        """Parse and dispatch a command."""
        try:
            parts = shlex.split(command)
        except ValueError as ex:
            print(f">>> Error processing command: {ex}")
            Logger.log(f"Error parsing command '{command}': {ex}", Logger.LogPriority.ERROR)
            return
        if not parts:
            return
        cmd = parts[0].lower()
        args = parts[1:]
        Logger.log(f"Processing command: {cmd} with args: {args}")
        self._execute_command(cmd, args)

    def _execute_command(self, cmd: str, args: List[str]):
        """Execute a command."""
        handlers = {
            'help': self._handle_help,
            'status': lambda a: self._handle_status(),
            'history': self._handle_history,
            'input_network': self._handle_input_network,
            'generate': self._handle_generate,
            'tick': self._handle_tick,
            'add_force': self._handle_add_force,
            'add_spring': self._handle_add_spring,
            'set_drag': self._handle_set_drag,
            'pause': self._handle_pause,
            'flags': self._handle_flags,
            'positions': self._handle_positions,
            'export': self._handle_export,
            'configure_logger': self._handle_configure_logger,
            'switch_view': self._handle_switch_view,
        }
        if cmd in ['exit', 'quit']:
            self.stop_view()
        elif cmd == 'clear':
            self.clear_view()
            self._print_welcome()
        elif cmd in handlers:
            handlers[cmd](args)
        else:
            print(f">>> Unknown command: '{cmd}'")
            print(">>> Type 'help' to see available commands")

    def _handle_help(self, args: List[str]):
        """Help command."""
        if not args:
            self._show_general_help()
        else:
            self._show_command_help(args[0])

    def _show_general_help(self):
        """List commands."""
        print("\n" + "=" * 60)
        print("                      NETVIEWER CLI HELP")
        print("=" * 60)
        print("Available commands:\n")
        for cmd, info in self.commands.items():
            print(f"  {cmd:<20} - {info['description']}")
        print("\nFor detailed help on a specific command, type: help <command>")
        print("=" * 60)

    def _show_command_help(self, command: str):
        """Show command details."""
        if command not in self.commands:
            print(f">>> Unknown command: '{command}'")
            return
        info = self.commands[command]
        print(f"\nCommand: {command}")
        print(f"Description: {info['description']}")
        print(f"Usage: {info['usage']}")
        print(f"Arguments: {info['args']}")
        print("Examples:")
        for example in info['examples']:
            print(f"  {example}")

    def _handle_status(self):
        """Status command."""
        state = self.controller.system_state
        print("\n" + "=" * 40)
        print("           SYSTEM STATUS")
        print("=" * 40)
        print(f"Network Loaded: {'Yes' if state.network_loaded else 'No'}")
        if state.network_loaded:
            network = self.controller.network
            print(f"Source: {state.source}")
            print(f"Number of Nodes: {len(network.get_nodes())}")
            print(f"Number of Edges: {len(network.get_edges())}")
            print(f"Network Type: {type(network).__name__}")
            for key, value in network.get_meta_data().items():
                print(f"Meta Data {key}: {value}")
        viewer = self.controller.viewer
        print(f"Viewer Attached: {'Yes' if viewer is not None else 'No'}")
        if viewer is not None:
            print(f"Drag: {viewer.drag}")
            print(f"Forces: {len(viewer.attractions)}")
            print(f"Paused: {'Yes' if viewer.is_paused() else 'No'}")
        print(f"Ticks Run: {state.ticks_run}")
        print(f"Feature Flags: {FeatureFlags.as_dict()}")
        print("=" * 40)

    def _handle_history(self, args: List[str]):
        """History command."""
        try:
            num = int(args[0]) if args else 10
        except ValueError:
            print(">>> Invalid number format")
            return
        if num <= 0:
            print(">>> Number must be positive")
            return
        history = self.command_history[-num:]
        if not history:
            print(">>> No command history available")
            return
        print("\nCommand History:")
        for i, cmd in enumerate(history, 1):
            print(f"  {i:2d}. {cmd}")

    def _handle_input_network(self, args: List[str]):
        """Load a network."""
        if not args:
            print(">>> Error: File path required")
            print(">>> Usage: input_network <file_path>")
            return
        file_path = args[0]
        try:
            self.controller.input_network(file_path)
        except FileNotFoundError:
            print(f">>> Error: File not found: {file_path}")
            return
        except UnsupportedFileTypeError as ex:
            print(f">>> Error: {ex}")
            return
        except InvalidInputDataError as ex:
            print(f">>> Error: Invalid input data - {ex}")
            return
        network = self.controller.network
        print(f">>> Network loaded successfully from: {file_path}")
        print(f">>> Network contains {len(network.get_nodes())} nodes and {len(network.get_edges())} edges")

    def _handle_generate(self, args: List[str]):
        """Generate a random network."""
        if len(args) not in (2, 3):
            print(">>> Error: Node and edge counts required")
            print(">>> Usage: generate <n_nodes> <n_edges> [seed]")
            return
        try:
            n_nodes, n_edges = int(args[0]), int(args[1])
            seed = int(args[2]) if len(args) == 3 else None
        except ValueError:
            print(">>> Error: Counts and seed must be integers")
            return
        try:
            self.controller.generate_network(n_nodes, n_edges, seed=seed)
        except ValueError as ex:
            print(f">>> Error: {ex}")
            return
        print(f">>> Generated network with {n_nodes} nodes and {n_edges} edges")

    def _handle_tick(self, args: List[str]):
        """Advance the layout."""
        try:
            steps = int(args[0]) if args else 1
            self.controller.tick(steps)
        except ValueError:
            print(">>> Error: Steps must be a non-negative integer")
            return
        except StateTransitionError:
            print(">>> Error: Network must be loaded before running the layout")
            return
        print(f">>> Advanced {steps} step(s); {self.controller.system_state.ticks_run} total")

    def _parse_pair(self, args: List[str], usage: str):
        if len(args) != 3:
            print(">>> Error: Three arguments required")
            print(f">>> Usage: {usage}")
            return None
        try:
            return int(args[0]), int(args[1]), float(args[2])
        except ValueError:
            print(">>> Error: Node IDs must be integers and the value a number")
            return None

    def _handle_add_force(self, args: List[str]):
        """Add a force between two nodes."""
        parsed = self._parse_pair(args, self.commands['add_force']['usage'])
        if parsed is None:
            return
        node_id1, node_id2, strength = parsed
        try:
            self.controller.add_force(node_id1, node_id2, strength)
        except StateTransitionError:
            print(">>> Error: Network must be loaded before adding forces")
            return
        except NodeNotFoundError as ex:
            print(f">>> Error: {ex}")
            return
        kind = "Attraction" if strength > 0 else "Repulsion"
        print(f">>> {kind} of {abs(strength)} set between nodes {node_id1} and {node_id2}")

    def _handle_add_spring(self, args: List[str]):
        """Add a spring between two nodes."""
        parsed = self._parse_pair(args, self.commands['add_spring']['usage'])
        if parsed is None:
            return
        node_id1, node_id2, length = parsed
        try:
            self.controller.add_spring(node_id1, node_id2, length)
        except StateTransitionError:
            print(">>> Error: Network must be loaded before adding springs")
            return
        except NodeNotFoundError as ex:
            print(f">>> Error: {ex}")
            return
        print(f">>> Spring of length {length} set between nodes {node_id1} and {node_id2}")

    def _handle_set_drag(self, args: List[str]):
        """Set particle drag."""
        if len(args) != 1:
            print(">>> Usage: set_drag <drag>")
            return
        try:
            drag = float(args[0])
            self.controller.set_drag(drag)
        except ValueError:
            print(">>> Error: Drag must be a non-negative number")
            return
        except StateTransitionError:
            print(">>> Error: Network must be loaded before setting drag")
            return
        print(f">>> Drag set to {drag}")

    def _handle_pause(self, args: List[str]):
        """Pause, resume or toggle the simulation."""
        try:
            currently_paused = self.controller.is_paused()
        except StateTransitionError:
            print(">>> Error: Network must be loaded before pausing")
            return
        if not args:
            paused = not currently_paused
        elif args[0].lower() in ('on', 'off'):
            paused = args[0].lower() == 'on'
        else:
            print(">>> Usage: pause [on|off]")
            return
        self.controller.set_paused(paused)
        print(f">>> Simulation {'paused' if paused else 'resumed'}")

    def _handle_flags(self, args: List[str]):
        """Show or toggle feature flags."""
        if args:
            toggles = {
                'draw_edges': FeatureFlags.toggle_draw_edges,
                'auto_centre': FeatureFlags.toggle_auto_centre,
            }
            toggle = toggles.get(args[0].lower())
            if toggle is None:
                print(f">>> Unknown flag: '{args[0]}'")
                return
            toggle()
        for name, value in FeatureFlags.as_dict().items():
            print(f">>> {name}: {'on' if value else 'off'}")

    def _handle_positions(self, args: List[str]):
        """Print node positions."""
        try:
            limit = int(args[0]) if args else None
        except ValueError:
            print(">>> Invalid number format")
            return
        try:
            positions = self.controller.get_positions()
        except StateTransitionError:
            print(">>> Error: No network loaded")
            return
        items = list(positions.items())[:limit]
        print(f"\n{'node':>8} {'x':>12} {'y':>12}")
        for node_id, (x, y) in items:
            print(f"{node_id:>8} {x:>12.3f} {y:>12.3f}")

    def _handle_export(self, args: List[str]):
        """Export results."""
        if len(args) != 3:
            print(">>> Error: Three arguments required")
            print(">>> Usage: export <data_strategy> <image_strategy> <folder_path>")
            print(">>> Examples:")
            for example in self.commands['export']['examples']:
                print(f">>>   {example}")
            return
        data_strategy, image_strategy, folder_path = args
        try:
            export_folder = self.controller.export(data_strategy, image_strategy, folder_path)
        except StateTransitionError:
            print(">>> Error: Cannot export - network not loaded")
            return
        except (ValueError, OSError) as ex:
            print(f">>> Error during export: {ex}")
            return
        print(f">>> Export completed successfully to: {export_folder}")

    def _handle_configure_logger(self, args: List[str]):
        """Configure logging."""
        if not args:
            print(">>> Error: Logger state required")
            print(f">>> Usage: {self.commands['configure_logger']['usage']}")
            return
        state = args[0].lower()
        if state == 'level':
            if len(args) != 2:
                print(">>> Usage: configure_logger level <debug|info|warning|error|critical>")
                return
            try:
                self.controller.configure_logger(Logger.is_logging_enabled, minimum_priority=args[1])
            except ValueError as ex:
                print(f">>> Error configuring logger: {ex}")
                return
            print(f">>> Logger level set to {args[1].upper()}")
            return
        if state not in ['enable', 'disable']:
            print(">>> Error: Logger state must be 'enable', 'disable' or 'level'")
            return
        enabled = state == 'enable'
        kwargs = {}
        if len(args) > 1 and enabled:
            kwargs['storage_strategy'] = 'file'
            kwargs['file_location'] = args[1]
        try:
            self.controller.configure_logger(enabled, **kwargs)
        except (ValueError, OSError) as ex:
            print(f">>> Error configuring logger: {ex}")
            return
        print(f">>> Logger {state}d successfully")

    def _handle_switch_view(self, args: List[str]):
        """Switch view."""
        if not args:
            print(">>> Error: View type required")
            print(">>> Usage: switch_view <view_type>")
            print(">>> Available views: tkinter")
            return
        view_type = args[0]
        try:
            self.controller.initiate_view(view_type)
        except ValueError as ex:
            print(f">>> Error: {ex}")
            return
        print(f">>> Switched to {view_type} view")

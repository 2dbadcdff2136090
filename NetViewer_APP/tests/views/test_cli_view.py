"""CommandLineView command handling, driven without a terminal."""

import pytest

from src.controllers.system_controller import SystemController
from src.config.feature_flags import FeatureFlags
from src.views.cli_view.cli_view import CommandLineView
from utils.logger.logger import Logger


@pytest.fixture
def cli():
    return CommandLineView(SystemController())


def run(cli, capsys, *commands):
    for command in commands:
        cli._process_command(command)
    return capsys.readouterr().out


def test_commands_need_a_network(cli, capsys):
    out = run(cli, capsys, "tick 5", "add_force 1 2 1", "positions", "pause")
    assert out.count("Error") == 4


def test_generate_and_tick(cli, capsys):
    out = run(cli, capsys, "generate 4 3 2", "tick 3", "tick 2")
    assert "Generated network with 4 nodes and 3 edges" in out
    assert "Advanced 2 step(s); 5 total" in out


def test_generate_rejects_bad_arguments(cli, capsys):
    out = run(cli, capsys, "generate four 3", "generate 3 9", "generate 3")
    assert "must be integers" in out
    assert "Cannot place 9 edges" in out
    assert "Usage: generate" in out
    assert cli.controller.network is None


def test_forces_springs_and_drag(cli, capsys):
    out = run(cli, capsys, "generate 4 3 2", "add_force 1 2 -5", "add_force 1 99 1",
              "add_spring 1 3 20", "set_drag 2", "set_drag fast")
    assert "Repulsion of 5.0 set between nodes 1 and 2" in out
    assert "Node ID 99 not found" in out
    assert "Spring of length 20.0 set between nodes 1 and 3" in out
    assert "Drag set to 2.0" in out
    assert "Drag must be a non-negative number" in out
    assert cli.controller.viewer.drag == 2.0


def test_positions(cli, capsys):
    out = run(cli, capsys, "generate 5 4 0", "positions 2")
    rows = [line for line in out.splitlines() if line.strip() and line.split()[0].isdigit()]
    assert len(rows) == 2


def test_pause_toggle(cli, capsys):
    out = run(cli, capsys, "generate 3 2 0", "pause", "pause off", "pause maybe")
    assert "Simulation paused" in out
    assert "Simulation resumed" in out
    assert "Usage: pause" in out
    assert not cli.controller.is_paused()


def test_flags(cli, capsys):
    out = run(cli, capsys, "flags auto_centre", "flags gravity")
    assert "AUTO_CENTRE: off" in out
    assert "Unknown flag" in out
    assert FeatureFlags.AUTO_CENTRE is False


def test_export(cli, capsys, tmp_path):
    out = run(cli, capsys, "generate 3 2 0", f"export csv_data_export_strategy none {tmp_path}",
              "export bogus none out", "export one two")
    assert "Export completed successfully" in out
    assert "Invalid data export strategy" in out
    assert "Three arguments required" in out


def test_input_network_errors(cli, capsys, tmp_path):
    out = run(cli, capsys, f"input_network {tmp_path / 'absent.csv'}", "input_network")
    assert "File not found" in out
    assert "File path required" in out


def test_configure_logger_level(cli, capsys):
    out = run(cli, capsys, "configure_logger level warning", "configure_logger level noisy",
              "configure_logger sideways")
    assert "Logger level set to WARNING" in out
    assert "Unknown log priority" in out
    assert Logger.minimum_priority == Logger.LogPriority.WARNING


def test_status_and_help(cli, capsys):
    out = run(cli, capsys, "status", "generate 3 2 0", "status", "help", "help tick", "help nothing")
    assert "Network Loaded: No" in out
    assert "Network Loaded: Yes" in out
    assert "Usage: tick [steps]" in out
    assert "Unknown command: 'nothing'" in out


def test_unknown_command_and_bad_quoting(cli, capsys):
    out = run(cli, capsys, "fly", 'input_network "unterminated')
    assert "Unknown command: 'fly'" in out
    assert "Error processing command" in out


def test_run_loop_until_exit(cli, capsys, monkeypatch):
    commands = iter(["generate 3 2 0", "", "tick 1", "history", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    cli.run()
    out = capsys.readouterr().out
    assert cli.running is False
    assert "1. generate 3 2 0" in out
    assert "Goodbye" in out


def test_run_loop_stops_at_end_of_input(cli, capsys, monkeypatch):
    def no_input(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", no_input)
    cli.run()
    assert "End of input" in capsys.readouterr().out
    assert cli.running is False

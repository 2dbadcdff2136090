"""Logger priorities, enable/disable and storage strategies."""

import pytest

from utils.logger.logger import Logger
from utils.logger.local_file_strategy import LocalFileStrategy
from utils.logger.log_storage_strategy import MemoryStrategy


def test_messages_are_stored_with_priority(log_memory):
    Logger.log("hello")
    Logger.log("careful", Logger.LogPriority.WARNING)
    assert "hello" in log_memory.messages("DEBUG")
    assert log_memory.messages("WARNING") == ["careful"]


def test_minimum_priority_filters(log_memory):
    Logger.set_minimum_priority("warning")
    Logger.log("dropped")
    Logger.log("kept", Logger.LogPriority.ERROR)
    assert "dropped" not in log_memory.messages()
    assert "kept" in log_memory.messages()


def test_unknown_priority_name():
    with pytest.raises(ValueError):
        Logger.set_minimum_priority("loud")


def test_disabled_logger_stores_nothing(log_memory):
    Logger.disable_logging()
    log_memory.flush_logs()
    Logger.log("silent", Logger.LogPriority.CRITICAL)
    assert log_memory.entries == []


def test_flush_clears_memory(log_memory):
    Logger.log("something")
    Logger.flush_logs()
    # flush_logs logs its own end marker after clearing
    assert "something" not in log_memory.messages()


def test_local_file_strategy(tmp_path):
    path = tmp_path / "logs" / "viewer.txt"
    Logger.set_log_storage_strategy(LocalFileStrategy(str(path)))
    Logger.log("to disk", Logger.LogPriority.INFO)
    text = path.read_text()
    assert text.startswith("LOG INITIALIZATION")
    assert "[INFO] to disk" in text


def test_local_file_strategy_keep_existing(tmp_path):
    path = tmp_path / "viewer.txt"
    path.write_text("earlier\n")
    LocalFileStrategy(str(path), keep_existing=True)
    assert path.read_text().startswith("earlier\nLOG REOPENED")


def test_initialize_uses_environment(tmp_path, monkeypatch):
    path = tmp_path / "env_log.txt"
    monkeypatch.setenv("NETVIEWER_LOG_PATH", str(path))
    Logger.set_log_storage_strategy(None)
    Logger.initialize()
    assert isinstance(Logger.log_storage_strategy, LocalFileStrategy)
    assert "Logger initialized" in path.read_text()


def test_memory_strategy_filter():
    memory = MemoryStrategy()
    memory.store_log("a", "INFO", "t")
    memory.store_log("b", "ERROR", "t")
    assert memory.messages() == ["a", "b"]
    assert memory.messages("ERROR") == ["b"]

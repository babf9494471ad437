"""Pytest fixtures for eventhub tests."""

import logging

import pytest

from eventhub.config import RegistryConfig
from eventhub.lib.events import EventRegistry


class Recorder:
    """Callable that remembers every call it receives."""

    def __init__(self, name="recorder", log=None):
        self.name = name
        self.calls = []
        self._log = log

    def __call__(self, *args):
        self.calls.append(args)
        if self._log is not None:
            self._log.append(self.name)

    @property
    def call_count(self):
        return len(self.calls)


@pytest.fixture
def events():
    """Create an EventRegistry with default configuration."""
    return EventRegistry()


@pytest.fixture
def isolating_events():
    """Create an EventRegistry that logs subscriber failures instead of raising."""
    return EventRegistry(RegistryConfig(isolate_failures=True))


@pytest.fixture
def call_log():
    """Shared list that recorders append their name to, in call order."""
    return []


@pytest.fixture
def make_recorder(call_log):
    """Factory for named Recorder callbacks sharing one call log."""

    def _make(name="recorder"):
        return Recorder(name, call_log)

    return _make


@pytest.fixture
def restore_logging():
    """Undo configure_logger changes to the root logger after a test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_levels = {
        name: logger.level
        for name, logger in logging.root.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)

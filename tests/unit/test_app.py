"""Tests for the command line entry point."""

import logging

from eventhub.app import build_registry, main, run_demo
from eventhub.lib.args import parse_eventhub_args
from eventhub.lib.events import EventRegistry


def test_run_demo_delivers_expected_events():
    """Test that once and cancelled subscriptions are not delivered again."""
    events = EventRegistry()

    assert run_demo(events) == [1, 2]
    assert "test_one_event" in events
    assert "test_two_event" not in events
    assert "test_three_event" not in events


def test_build_registry_cli_overrides_config_file(tmp_path):
    config_path = tmp_path / "eventhub.ini"
    config_path.write_text("[EVENTHUB]\nlog_level = error\n", encoding="utf-8")

    args = parse_eventhub_args(
        ["--config-file", str(config_path), "--log-level", "debug", "--isolate-failures"]
    )
    events = build_registry(args)

    assert events.config.log_level == logging.DEBUG
    assert events.config.isolate_failures is True


def test_build_registry_uses_config_file(tmp_path):
    config_path = tmp_path / "eventhub.ini"
    config_path.write_text("[EVENTHUB]\nlog_level = error\n", encoding="utf-8")

    events = build_registry(parse_eventhub_args(["--config-file", str(config_path)]))

    assert events.config.log_level == logging.ERROR
    assert events.config.isolate_failures is False


def test_main_returns_zero(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    exit_code = main(
        ["--config-file", str(tmp_path / "missing.ini"), "--log-dir", str(log_dir)]
    )

    assert exit_code == 0
    assert list(log_dir.glob("*.log"))

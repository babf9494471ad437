"""Tests for logger configuration."""

import logging
import os
import time

from eventhub.lib.logger import clean_old_logs, configure_logger


def test_clean_old_logs_keeps_newest(tmp_path):
    for i in range(4):
        log = tmp_path / f"{i}.log"
        log.write_text("x")
        stamp = time.time() - (10 - i)
        os.utime(log, (stamp, stamp))

    clean_old_logs(tmp_path, max_files=2)

    assert sorted(p.name for p in tmp_path.glob("*.log")) == ["2.log", "3.log"]


def test_clean_old_logs_ignores_other_files(tmp_path):
    (tmp_path / "notes.txt").write_text("keep")
    clean_old_logs(tmp_path, max_files=0)

    assert (tmp_path / "notes.txt").exists()


def test_configure_logger_writes_log_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"

    log_file = configure_logger(log_level=logging.INFO, log_dir=log_dir)
    logging.getLogger("eventhub.test").info("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file.parent == log_dir
    assert "hello from test" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO

"""Command line entry point: wires one shared registry and exercises it."""

from __future__ import annotations

import logging
from pathlib import Path

from eventhub.config import RegistryConfig
from eventhub.lib.args import parse_eventhub_args
from eventhub.lib.events import EventRegistry
from eventhub.lib.logger import configure_logger
from eventhub.lib.settings import load_registry_config


def build_registry(args) -> EventRegistry:
    """Resolve config file and CLI flags into the process-wide registry.

    Priority: CLI argument (if provided) > config file > defaults
    """
    config: RegistryConfig = load_registry_config(args.config_file)
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.isolate_failures:
        config.isolate_failures = True
    return EventRegistry(config)


def run_demo(events: EventRegistry) -> list[int]:
    """Fire a few events through ``events`` and return the event IDs that were delivered."""
    received: list[int] = []

    def record(label):
        def callback(payload):
            logging.info(f"{label} fired with {payload}")
            received.append(payload["eventID"])

        return callback

    events.on("test_one_event", record("test_one_event"))
    events.once("test_two_event", record("test_two_event (once)"))
    three = events.on("test_three_event", record("test_three_event"))

    events.fire("test_one_event", {"eventID": 1})
    events.fire("test_two_event", {"eventID": 2})
    # Already unsubscribed, it was subscribed once only
    events.fire("test_two_event", {"eventID": 3})
    three.cancel()
    events.fire("test_three_event", {"eventID": 4})

    logging.info(f"Delivered event IDs: {received}")
    return received


def main(argv=None) -> int:
    args = parse_eventhub_args(argv)
    events = build_registry(args)

    log_dir = Path(args.log_dir) if args.log_dir else None
    log_file = configure_logger(
        log_level=events.config.log_level, log_dir=log_dir, max_log_files=args.max_log_files
    )
    logging.debug(f"Logging to {log_file}")
    logging.debug(f"Registry config: {events.config}")

    run_demo(events)
    events.remove_all_subscriptions()
    return 0

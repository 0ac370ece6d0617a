"""
WORKER queues entry point

Builds one bounded collection from the command line (defaults come from the
WORKER_QUEUE_* environment variables), applies any inserts, then prints the
snapshot followed by the order in which the collection hands items out.
"""

import argparse
import sys
from typing import List, Optional

from task_queue import EMPTY, QueueManager, QueueSettings
from task_queue.config import parse_capacity


def build_parser(defaults: QueueSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fks-worker-queues",
        description="Fill a bounded collection and show its pull order.",
    )
    parser.add_argument("items", nargs="*", help="Initial contents, in order")
    parser.add_argument(
        "--kind",
        choices=["last", "first", "filo", "fifo"],
        default=defaults.kind,
        help="Collection type (default: %(default)s)",
    )
    parser.add_argument(
        "--capacity",
        type=parse_capacity,
        default=defaults.capacity,
        help="Capacity bound (default: unbounded)",
    )
    parser.add_argument(
        "--insert",
        action="append",
        default=[],
        metavar="ITEM",
        help="Item to insert after construction (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    defaults = QueueSettings.from_env()
    args = build_parser(defaults).parse_intermixed_args(argv)

    settings = QueueSettings(
        name=defaults.name,
        kind=args.kind,
        capacity=args.capacity,
    )
    manager = QueueManager()
    manager.create(settings, initial=list(args.items))
    for item in args.insert:
        manager.push(settings.name, item)

    print(f"snapshot: {manager.snapshot(settings.name)}")
    while True:
        item = manager.pop(settings.name)
        if item is EMPTY:
            break
        print(item)
    return 0


if __name__ == "__main__":
    sys.exit(main())

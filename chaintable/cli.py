import argparse
import logging.config
import os
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

import psutil

from chaintable.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, LOGGING
from chaintable.errors import InvalidArgument
from chaintable.hash_table import HashTable
from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_error_event, log_key_event, log_memory_event, logger

ABSENT = "<absent>"
COMMANDS = ("put", "search", "remove", "contains")


def get_memory_usage() -> int:
    """Return current process RSS memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def parse_command(line: str) -> Tuple[str, int, Optional[str]]:
    """Split one command line into (command, key, value).

    `put` keeps everything after the key as the value, so values may contain
    spaces. Raises ValueError for anything malformed.
    """
    parts = line.split(maxsplit=2)
    if not parts or parts[0] not in COMMANDS:
        raise ValueError(f"unknown command: {line!r}")

    command = parts[0]
    if len(parts) < 2:
        raise ValueError(f"{command} needs a key: {line!r}")
    key = int(parts[1])

    if command == "put":
        if len(parts) < 3:
            raise ValueError(f"put needs a value: {line!r}")
        return command, key, parts[2]

    if len(parts) > 2:
        raise ValueError(f"{command} takes only a key: {line!r}")
    return command, key, None


def replay_commands(table: HashTable, lines: Iterable[str], out: TextIO) -> int:
    """Apply every command to the table, writing lookup results to `out`.

    Returns the number of lines skipped as malformed.
    """
    skipped = 0
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        try:
            command, key, value = parse_command(line)
        except ValueError as e:
            log_error_event(LogEvent.BAD_COMMAND, str(e), line=line_no)
            skipped += 1
            continue

        if command == "put":
            event = LogEvent.KEY_UPDATED if table.contains_key(key) else LogEvent.KEY_INSERTED
            table.put(key, value)
            log_key_event(event, key, value)
        elif command == "search":
            found = table.search(key)
            out.write(f"{found if found is not None else ABSENT}\n")
        elif command == "remove":
            removed = table.remove(key)
            log_key_event(LogEvent.KEY_REMOVED if removed is not None else LogEvent.KEY_NOT_FOUND, key)
            out.write(f"{removed if removed is not None else ABSENT}\n")
        else:
            out.write(f"{'true' if table.contains_key(key) else 'false'}\n")

    return skipped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chaintable",
        description="Replay put/search/remove/contains commands against a chained hash table.",
    )
    parser.add_argument(
        "-i",
        "--input_file",
        required=True,
        type=str,
        help="Path to the command file, one command per line",
    )
    parser.add_argument(
        "-o",
        "--output_file",
        type=str,
        default=None,
        help="Where lookup results and the summary are written (stdout by default)",
    )
    parser.add_argument(
        "-c",
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help="Initial number of buckets",
    )
    parser.add_argument(
        "-l",
        "--load_factor",
        type=float,
        default=DEFAULT_LOAD_FACTOR,
        help="Occupancy ratio in (0, 1] that triggers growth",
    )
    return parser


def run(table: HashTable, fin: TextIO, out: TextIO) -> int:
    log_memory_event(LogEvent.MEMORY_USAGE, "before_replay", get_memory_usage())
    skipped = replay_commands(table, fin, out)
    log_memory_event(LogEvent.MEMORY_USAGE, "after_replay", get_memory_usage())

    out.write(f"size={table.size()} capacity={table.capacity()} load_factor={table.load_factor()}\n")
    if skipped:
        logger.warning(f"Skipped {skipped} malformed command line(s)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.config.dictConfig(LOGGING)

    try:
        table = HashTable(args.capacity, args.load_factor)
    except InvalidArgument:
        # already logged by the table
        return 1

    # the output file is only truncated once the input is known to be readable
    try:
        with open(args.input_file, "r") as fin:
            if args.output_file:
                with open(args.output_file, "w") as fout:
                    return run(table, fin, fout)
            return run(table, fin, sys.stdout)
    except OSError as e:
        log_error_event(LogEvent.IO_ERROR, str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

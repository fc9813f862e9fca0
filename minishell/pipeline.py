"""Run two programs connected by a pipe, narrating each step."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO


def _say(log: TextIO, message: str) -> None:
    log.write(message + "\n")
    log.flush()


def _spawn(argv: list[str], label: str, log: TextIO, **streams) -> subprocess.Popen | None:
    try:
        return subprocess.Popen(argv, **streams)
    except OSError as exc:
        _say(log, f"{label} error: {exc}")
        return None


def run_pipeline(first, second, log=None) -> tuple[int, int]:
    """Run ``first | second`` and return both exit codes.

    A program that cannot be started counts as having exited with status 1.
    """
    log = sys.stderr if log is None else log
    first, second = list(first), list(second)
    read_fd, write_fd = os.pipe()

    _say(log, "(parent_process>forking...)")
    _say(log, "(child1>redirecting stdout to the write end of the pipe...)")
    _say(log, f"(child1>going to execute cmd {' '.join(first)})")
    try:
        child1 = _spawn(first, "child1", log, stdout=write_fd)
        if child1 is not None:
            _say(log, f"(parent_process>created process with id {child1.pid})")
    finally:
        _say(log, "(parent_process>closing the write end of the pipe...)")
        os.close(write_fd)

    _say(log, "(parent_process>forking...)")
    _say(log, "(child2>redirecting stdin to the read end of the pipe...)")
    _say(log, f"(child2>going to execute cmd {' '.join(second)})")
    try:
        child2 = _spawn(second, "child2", log, stdin=read_fd)
        if child2 is not None:
            _say(log, f"(parent_process>created process with id {child2.pid})")
    finally:
        _say(log, "(parent_process>closing the read end of the pipe...)")
        os.close(read_fd)

    _say(log, "(parent_process>waiting for child processes to terminate...)")
    first_code = child1.wait() if child1 is not None else 1
    second_code = child2.wait() if child2 is not None else 1
    return first_code, second_code


def main(argv=None) -> int:
    """Show the processes whose listing contains a 5."""
    run_pipeline(["ps", "-xl"], ["grep", "5"], sys.stderr)
    _say(sys.stderr, "(parent_process>exiting...)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
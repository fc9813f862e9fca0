"""Tracking of the child processes a shell has started."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Iterator

from minishell.lineparser import CommandLine


class ProcessStatus(enum.IntEnum):
    """The state of a tracked process."""

    TERMINATED = -1
    SUSPENDED = 0
    RUNNING = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Process:
    """A child process and the command it runs."""

    command: CommandLine
    pid: int
    status: ProcessStatus = ProcessStatus.RUNNING


_WAIT_FLAGS = os.WNOHANG | os.WUNTRACED | os.WCONTINUED


class ProcessTable:
    """The shell's processes, newest first."""

    def __init__(self) -> None:
        self._processes: list[Process] = []

    def __iter__(self) -> Iterator[Process]:
        return iter(self._processes)

    def __len__(self) -> int:
        return len(self._processes)

    def add(self, command: CommandLine, pid: int) -> Process:
        """Track ``pid`` running ``command`` as a running process."""
        process = Process(command, pid)
        self._processes.insert(0, process)
        return process

    def refresh(self) -> None:
        """Update every status from what the system reports, without blocking."""
        for process in self._processes:
            try:
                pid, status = os.waitpid(process.pid, _WAIT_FLAGS)
            except ChildProcessError:
                process.status = ProcessStatus.TERMINATED
                continue
            if pid <= 0:
                continue
            if os.WIFSTOPPED(status):
                process.status = ProcessStatus.SUSPENDED
            elif os.WIFCONTINUED(status):
                process.status = ProcessStatus.RUNNING
            elif os.WIFEXITED(status) or os.WIFSIGNALED(status):
                process.status = ProcessStatus.TERMINATED

    def set_status(self, pid: int, status: ProcessStatus) -> None:
        """Set the status of the newest process with ``pid``, if any."""
        for process in self._processes:
            if process.pid == pid:
                process.status = status
                return

    def render(self) -> str:
        """Refresh, list every process, then forget the terminated ones."""
        self.refresh()
        lines = ["PID\t\tSTATUS\t\tCommand\n"]
        for process in self._processes:
            arguments = "".join(f"{arg} " for arg in process.command.arguments)
            lines.append(f"{process.pid}\t\t{process.status.label}\t\t{arguments}\n")
        self._processes = [
            process
            for process in self._processes
            if process.status is not ProcessStatus.TERMINATED
        ]
        return "".join(lines)
"""An interactive shell with history, pipes, redirection and job control."""

from __future__ import annotations

import os
import re
import signal
import subprocess
import sys
from contextlib import ExitStack
from typing import TextIO

from minishell.history import History
from minishell.lineparser import CommandLine, ParsedLine, parse_command_lines
from minishell.processes import ProcessStatus, ProcessTable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_OUTPUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC

_SIGNAL_COMMANDS = {
    "stop": (signal.SIGTSTP, ProcessStatus.SUSPENDED),
    "wakeup": (signal.SIGCONT, ProcessStatus.RUNNING),
    "ice": (signal.SIGINT, ProcessStatus.TERMINATED),
    "nuke": (signal.SIGKILL, ProcessStatus.TERMINATED),
}


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Shell:
    """Reads command lines and runs them as child processes."""

    def __init__(self, debug: bool = False, out: TextIO | None = None,
                 err: TextIO | None = None) -> None:
        self.debug = debug
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.history = History()
        self.processes = ProcessTable()

    def _error(self, message: str) -> None:
        self.err.write(message + "\n")
        self.err.flush()

    def run(self, stream: TextIO) -> int:
        """Serve lines from ``stream`` until it ends or ``quit`` is entered."""
        while True:
            self.out.write(f"current working directory is:{os.getcwd()}\n")
            self.out.flush()
            line = stream.readline()
            if not line:
                return 0
            if not self.handle_line(line):
                return 0

    def handle_line(self, line: str) -> bool:
        """Run one input line; return False when the shell should stop."""
        line = line.split("\n", 1)[0]
        if not line:
            return True

        if line.startswith("!"):
            try:
                if line == "!!":
                    line = self.history.last()
                else:
                    line = self.history.get(_leading_int(line[1:]))
            except IndexError:
                self._error("Error: out of range")
                return True
            self.out.write(f"the retrieved cmd is: {line}\n")

        self.history.add(line)
        parsed = parse_command_lines(line)
        if parsed is None or not parsed[0].arguments:
            return True

        arguments = parsed[0].arguments
        name = arguments[0]
        if name == "quit":
            return False
        if name == "cd":
            try:
                os.chdir(arguments[1])
            except (IndexError, OSError):
                self._error("cd operation has failed")
        elif name == "history":
            self.out.write(self.history.format())
        elif name == "procs":
            self.out.write(self.processes.render())
        elif name in _SIGNAL_COMMANDS:
            self.send_signal(name, arguments[1] if len(arguments) > 1 else None)
        else:
            self.execute(parsed)
        self.out.flush()
        return True

    def send_signal(self, name: str, pid_text: str | None) -> bool:
        """Send the signal of command ``name`` to ``pid_text``; report success."""
        try:
            signum, status = _SIGNAL_COMMANDS[name]
        except KeyError:
            raise ValueError(f"unknown signal command: {name}") from None
        pid = _leading_int(pid_text) if pid_text is not None else 0
        if pid <= 0:
            self._error("no valid pid")
            return False
        target = -pid if name == "nuke" else pid
        try:
            os.kill(target, signum)
        except OSError:
            return False
        self.processes.set_status(pid, status)
        return True

    def _launch(self, command: CommandLine, stdin=None, stdout=None) -> subprocess.Popen | None:
        if not command.arguments:
            self._error("missing command")
            return None
        with ExitStack() as stack:
            if command.input_redirect is not None:
                try:
                    stdin = stack.enter_context(open(command.input_redirect, "rb"))
                except OSError as exc:
                    self._error(f"open input error: {exc}")
                    return None
            if command.output_redirect is not None:
                try:
                    fd = os.open(command.output_redirect, _OUTPUT_FLAGS, 0o600)
                except OSError as exc:
                    self._error(f"open output error: {exc}")
                    return None
                stdout = stack.enter_context(os.fdopen(fd, "wb"))
            try:
                return subprocess.Popen(command.arguments, stdin=stdin, stdout=stdout)
            except OSError as exc:
                self._error(f"execute error: {exc}")
                return None

    def _finish(self, command: CommandLine, child: subprocess.Popen | None) -> None:
        if child is None:
            return
        if command.blocking:
            child.wait()
            self.processes.set_status(child.pid, ProcessStatus.TERMINATED)

    def execute(self, commands: ParsedLine) -> None:
        """Start the commands of a parsed line, piping the first two together."""
        self.out.flush()
        first = commands[0]
        if len(commands) == 1:
            child = self._launch(first)
            if child is None:
                return
            self.processes.add(first, child.pid)
            if self.debug:
                mode = "foreground" if first.blocking else "background"
                self._error(f"PID: {child.pid}\nfile name: {first.arguments[0]}\n{mode}")
            self._finish(first, child)
            return

        second = commands[1]
        if first.output_redirect is not None or second.input_redirect is not None:
            self._error("invalid redirection for pipeline")
            return
        read_fd, write_fd = os.pipe()
        with ExitStack() as stack:
            stack.callback(os.close, read_fd)
            stack.callback(os.close, write_fd)
            child1 = self._launch(first, stdout=write_fd)
            child2 = self._launch(second, stdin=read_fd)
        for command, child in ((first, child1), (second, child2)):
            if child is not None:
                self.processes.add(command, child.pid)
        self._finish(first, child1)
        self._finish(second, child2)


def main(argv=None) -> int:
    """Run the shell on standard input; ``-d`` turns on debug output."""
    argv = sys.argv[1:] if argv is None else argv
    return Shell(debug="-d" in argv).run(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
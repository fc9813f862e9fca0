"""Parsing of shell command lines into pipelines of commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

MAX_ARGUMENTS = 256

_WHITESPACE = " \t\n\r\v\f"
_REDIRECT_TARGET = re.compile(r" *([^ <>]*)")
_REDIRECT_MARK = re.compile(r"[<>]")


@dataclass
class CommandLine:
    """One command of a pipeline: its arguments and redirections."""

    arguments: list[str] = field(default_factory=list)
    input_redirect: str | None = None
    output_redirect: str | None = None
    blocking: bool = False
    idx: int = 0

    def replace_argument(self, index: int, value: str) -> None:
        """Replace the argument at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.arguments):
            raise IndexError(
                f"argument index {index} out of range for {len(self.arguments)} arguments"
            )
        self.arguments[index] = value


@dataclass
class ParsedLine:
    """A parsed input line: the commands of a pipeline, in order."""

    commands: tuple[CommandLine, ...]

    def __iter__(self) -> Iterator[CommandLine]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> CommandLine:
        return self.commands[index]


def _is_blank(text: str) -> bool:
    return not text.strip(_WHITESPACE)


def _redirect_target(text: str) -> str | None:
    word = _REDIRECT_TARGET.match(text).group(1)
    return word or None


def _parse_single(segment: str, idx: int) -> CommandLine:
    command = CommandLine(idx=idx)
    for mark in _REDIRECT_MARK.finditer(segment):
        target = _redirect_target(segment[mark.end():])
        if mark.group() == "<":
            command.input_redirect = target
        else:
            command.output_redirect = target
    head = _REDIRECT_MARK.split(segment, maxsplit=1)[0]
    words = [word for word in head.split(" ") if word]
    command.arguments = words[: MAX_ARGUMENTS - 1]
    return command


def parse_command_lines(line: str) -> ParsedLine | None:
    """Parse ``line`` into a pipeline; return None when there is nothing to run."""
    if _is_blank(line):
        return None
    if line.endswith("\n"):
        line = line[:-1]
    head, ampersand, _ = line.partition("&")

    commands: list[CommandLine] = []
    rest = head
    while not _is_blank(rest):
        segment, bar, tail = rest.partition("|")
        if _is_blank(segment):
            break
        commands.append(_parse_single(segment, len(commands)))
        if not bar:
            break
        rest = tail

    if not commands:
        return None
    commands[-1].blocking = not ampersand
    return ParsedLine(tuple(commands))
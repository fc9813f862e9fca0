# minishell

A small interactive shell for POSIX systems. It runs external programs and
supports I/O redirection, two-stage pipes, background jobs, a process table
with job control, and a short command history.

## Installation

```
pip install .
```

## The shell

```
minishell        # start the shell
minishell -d     # start with debug output on standard error
```

Before each prompt the shell prints the current working directory. It reads
one line at a time and stops at end of input or at `quit`.

### Command syntax

- `cmd arg1 arg2`: run a program found on `PATH`
- `cmd < in.txt > out.txt`: redirect standard input and output (an output
  file is created with mode 0600 and truncated)
- `left | right`: connect the output of `left` to the input of `right`
- `cmd &`: run without waiting for it to finish

Arguments are separated by spaces. A pipeline cannot redirect the output of
its left side or the input of its right side.

With `-d`, the shell reports the PID, program name and whether a single
command runs in the foreground or background.

### Built-in commands

| Command        | Effect                                                    |
|----------------|-----------------------------------------------------------|
| `quit`         | leave the shell                                           |
| `cd DIR`       | change the working directory                              |
| `history`      | list the last 10 commands, oldest first                   |
| `!!`           | run the most recent command again                         |
| `!N`           | run command number `N` from the history list              |
| `procs`        | show started processes and their status, then forget the ones that have terminated |
| `stop PID`     | suspend a process (SIGTSTP)                               |
| `wakeup PID`   | resume a process (SIGCONT)                                |
| `ice PID`      | interrupt a process (SIGINT)                              |
| `nuke PID`     | kill the process group of `PID` (SIGKILL)                 |

Commands recalled with `!!` or `!N` go into the history as the command they
stand for, not as `!!` or `!N` themselves. A number outside the history
prints `Error: out of range`.

## The pipeline demo

```
minishell-pipeline
```

Runs `ps -xl | grep 5` and logs each step of setting up the pipe on standard
error. The same machinery is available as
`minishell.pipeline.run_pipeline(first, second, log)`, which runs
`first | second` and returns both exit codes; a program that cannot be
started counts as exiting with status 1.

## Using the parser from Python

```python
from minishell.lineparser import parse_command_lines

parsed = parse_command_lines("cat < in.txt | sort > out.txt &")
```

`parse_command_lines` returns `None` for a blank line. Otherwise it returns a
`ParsedLine` holding the commands in pipeline order. Each `CommandLine` holds
its `arguments`, its `input_redirect` and `output_redirect`, whether the shell
waits for it (`blocking`), and its position in the pipeline (`idx`).
`CommandLine.replace_argument(index, value)` swaps one argument and raises
`IndexError` when the index is out of range.

The history and process table are usable on their own too:
`minishell.history.History` and `minishell.processes.ProcessTable`.

## What it does not do

- It has no quoting, escaping, variable expansion or wildcard expansion.
- Only the first two commands of a pipeline are run; later stages are ignored.
- It ships no signal-reporting test program. To try `stop`, `wakeup` and
  `ice`, start any long-running program in the background (for example
  `sleep 100 &`) and use its PID from `procs`.
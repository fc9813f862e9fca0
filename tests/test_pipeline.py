import io
import sys
from unittest import mock

from minishell.pipeline import main, run_pipeline

_PRODUCER = [sys.executable, "-c", "print('a5'); print('b'); print('c55')"]
_FILTER = [sys.executable, "-c", "import sys\nfor l in sys.stdin:\n    '5' in l and print(l, end='')"]


def test_output_flows_through_pipe(capfd):
    log = io.StringIO()
    codes = run_pipeline(_PRODUCER, _FILTER, log)
    assert codes == (0, 0)
    assert capfd.readouterr().out == "a5\nc55\n"


def test_log_narrates_steps_in_order(capfd):
    log = io.StringIO()
    run_pipeline(_PRODUCER, _FILTER, log)
    lines = log.getvalue().splitlines()
    assert lines[0] == "(parent_process>forking...)"
    assert lines[-1] == "(parent_process>waiting for child processes to terminate...)"
    assert lines.index("(parent_process>closing the write end of the pipe...)") < lines.index(
        "(parent_process>closing the read end of the pipe...)"
    )
    assert sum("created process with id" in line for line in lines) == 2


def test_exit_codes_are_reported(capfd):
    failing = [sys.executable, "-c", "import sys; sys.exit(3)"]
    codes = run_pipeline(failing, [sys.executable, "-c", "import sys; sys.stdin.read()"], io.StringIO())
    assert codes == (3, 0)


def test_missing_program_counts_as_failure(capfd):
    log = io.StringIO()
    codes = run_pipeline(["no-such-program-for-minishell"], _FILTER, log)
    assert codes == (1, 0)
    assert "child1 error" in log.getvalue()
    assert capfd.readouterr().out == ""


def test_main_runs_ps_into_grep(capsys):
    process = mock.Mock(pid=42)
    process.wait.return_value = 0
    with mock.patch("subprocess.Popen", return_value=process) as popen:
        assert main([]) == 0
    commands = [c.args[0] for c in popen.call_args_list]
    assert commands == [["ps", "-xl"], ["grep", "5"]]
    assert capsys.readouterr().err.endswith("(parent_process>exiting...)\n")
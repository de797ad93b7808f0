import sys
from network.runner import CommandRunner, ActionRecord

async def test_captures_stdout_and_stderr():
    rec = await CommandRunner().run("py", [
        sys.executable, "-c",
        "import sys; print('to out'); print('to err', file=sys.stderr)",
    ])
    assert rec.ok
    assert "to out" in rec.output
    assert "to err" in rec.output

async def test_nonzero_exit_is_recorded():
    rec = await CommandRunner().run("py", [sys.executable, "-c",
                                           "import sys; sys.exit(3)"])
    assert not rec.ok
    assert rec.error == "exit status 3"

async def test_missing_command_is_recorded():
    rec = await CommandRunner().run("ghost", ["/nonexistent/rpac-ghost"])
    assert not rec.ok
    assert rec.output == ""
    assert rec.error

def test_command_quotes_args():
    rec = ActionRecord(tag="t", argv=("echo", "a b"), output="")
    assert rec.command == "echo 'a b'"

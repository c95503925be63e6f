import os
import sys
import pytest
from convoy.RUNNERS.process_runner import ProcessRunner


def test_run_returns_exit_code():
    runner = ProcessRunner("test")
    assert runner.run([sys.executable, "-c", "import sys; sys.exit(0)"]) == 0
    assert runner.run([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3

def test_run_in_working_dir(tmp_path):
    runner = ProcessRunner("test")
    cwd = os.getcwd()
    script = "import os; open('marker', 'w').write(os.getcwd())"
    assert runner.run([sys.executable, "-c", script], working_dir=str(tmp_path)) == 0
    assert (tmp_path / "marker").exists()
    assert os.getcwd() == cwd

def test_missing_executable_raises():
    runner = ProcessRunner("test")
    with pytest.raises(OSError):
        runner.run(["convoy-no-such-executable"])

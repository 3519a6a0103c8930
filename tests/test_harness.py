import os

import pytest

import harness
from harness import ExecutionResult, TargetNotFoundError, build_command, resolve_command, run_input

posix_only = pytest.mark.skipif(os.name == "nt", reason="targets are POSIX shell scripts")


def test_resolve_command_missing(tmp_path):
    with pytest.raises(TargetNotFoundError, match="Could not find command 'nope.sh'"):
        resolve_command("nope.sh", str(tmp_path))


def test_resolve_command_is_relative_to_working_dir(tmp_path):
    (tmp_path / "target.sh").write_text("")
    assert resolve_command("target.sh", str(tmp_path)) == "target.sh"
    assert resolve_command("./target.sh", str(tmp_path)) == "./target.sh"


def test_target_not_found_is_runtime_error():
    assert issubclass(TargetNotFoundError, RuntimeError)


def test_build_command_wraps_in_shell(monkeypatch):
    monkeypatch.setattr(harness, "IS_WINDOWS", True)
    assert build_command("t.bat") == ["cmd.exe", "/c", "t.bat"]
    monkeypatch.setattr(harness, "IS_WINDOWS", False)
    assert build_command("./t.sh") == ["sh", "-c", "./t.sh"]


def test_kill_takes_down_process_tree_on_windows(monkeypatch):
    calls = []

    class FakeProc:
        pid = 4321

    monkeypatch.setattr(harness, "IS_WINDOWS", True)
    monkeypatch.setattr(harness.subprocess, "run", lambda args, **kwargs: calls.append(args))
    harness._kill(FakeProc())
    assert calls == [["taskkill", "/F", "/T", "/PID", "4321"]]


def test_execution_result_passed():
    assert ExecutionResult("x", "", 0).passed
    assert not ExecutionResult("x", "", 1).passed
    assert not ExecutionResult("x", "", None, "boom").passed
    assert not ExecutionResult("x", "", 0, "timed out").passed


@posix_only
def test_run_input_feeds_stdin_and_merges_stderr(make_target):
    cmd = make_target("echo.sh", "cat\necho oops >&2\nexit 3")
    result = run_input(build_command(cmd), "<html></html>", "./")
    assert result.exit_code == 3
    assert result.error is None
    assert "<html></html>" in result.output
    assert "oops" in result.output
    assert result.input == "<html></html>"


@posix_only
def test_run_input_sends_utf8(make_target):
    cmd = make_target("echo.sh", "cat")
    result = run_input(build_command(cmd), "<p>héllo ✓</p>", "./")
    assert result.passed
    assert result.output == "<p>héllo ✓</p>"


@posix_only
def test_run_input_target_ignoring_stdin(make_target):
    cmd = make_target("quiet.sh", "exit 0")
    result = run_input(build_command(cmd), "x" * 200000, "./")
    assert result.exit_code == 0


@posix_only
def test_run_input_timeout_is_a_failure(make_target):
    cmd = make_target("hang.sh", "exec sleep 5")
    result = run_input(build_command(cmd), "", "./", timeout=0.5)
    assert not result.passed
    assert "timed out" in result.error


def test_run_input_launch_failure_is_captured(tmp_path):
    result = run_input([str(tmp_path / "does-not-exist")], "data", str(tmp_path))
    assert result.exit_code is None
    assert result.error
    assert not result.passed


def test_run_input_unencodable_input_is_captured(tmp_path):
    result = run_input([str(tmp_path / "never-started")], "<p>\udcff</p>", str(tmp_path))
    assert result.exit_code is None
    assert "UTF-8" in result.error
    assert not result.passed

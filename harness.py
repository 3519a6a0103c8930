import os
import signal
import subprocess
from dataclasses import dataclass
from typing import List, Optional

IS_WINDOWS = os.name == "nt"


class TargetNotFoundError(RuntimeError):
    pass


@dataclass
class ExecutionResult:
    input: str
    output: str
    exit_code: Optional[int]
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.exit_code == 0


def resolve_command(command: str, working_dir: str) -> str:
    """Make sure the command exists relative to working_dir before anything runs."""
    if not os.path.exists(os.path.join(working_dir, command)):
        raise TargetNotFoundError(f"Could not find command '{command}'.")
    return command


def build_command(command: str) -> List[str]:
    if IS_WINDOWS:
        return ["cmd.exe", "/c", command]
    return ["sh", "-c", command]


def _kill(proc: subprocess.Popen):
    # the shell wrapper may have children of its own holding the output pipe
    if IS_WINDOWS:
        subprocess.run(
            ["taskkill", "/F", "/T", "/PID", str(proc.pid)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def run_input(argv: List[str], data: str, working_dir: str, timeout: Optional[float] = None) -> ExecutionResult:
    """
    Runs argv in working_dir with data fed to its stdin, stderr merged into stdout.
    Encoding, launch, pipe and timeout failures are returned as an errored result, never raised.
    """
    try:
        payload = data.encode("utf-8")
    except UnicodeEncodeError as e:
        return ExecutionResult(data, "", None, f"input is not encodable as UTF-8: {e}")

    try:
        with subprocess.Popen(
            argv,
            cwd=working_dir,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            start_new_session=not IS_WINDOWS,
        ) as proc:
            try:
                out, _ = proc.communicate(payload, timeout=timeout)
            except subprocess.TimeoutExpired:
                _kill(proc)
                out, _ = proc.communicate()
                return ExecutionResult(
                    data,
                    out.decode("utf-8", errors="ignore"),
                    proc.returncode,
                    f"timed out after {timeout}s",
                )
            return ExecutionResult(data, out.decode("utf-8", errors="ignore"), proc.returncode)
    except (OSError, subprocess.SubprocessError) as e:
        return ExecutionResult(data, "", None, str(e))

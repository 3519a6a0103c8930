import os
import signal
from typing import Optional


def signal_name(sig: int) -> str:
    try:
        return signal.Signals(sig).name
    except ValueError:
        return f"SIG{sig}"


def describe_exit_code(rc: Optional[int]) -> str:
    if rc is None:
        return "none"
    # negative return codes mean the child was killed by signal -rc
    if rc < 0:
        return f"{rc} ({signal_name(-rc)})"
    return str(rc)


def env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v


def env_timeout(name: str, default: Optional[float]) -> Optional[float]:
    """Read a timeout in seconds; unset keeps the default, 0 or less disables it."""
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        seconds = float(v)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {v!r}")
    return seconds if seconds > 0 else None


def printable(text: str) -> str:
    # lone surrogates cannot be written to a strict utf-8 console
    return text.encode("utf-8", errors="backslashreplace").decode("utf-8")

"""Pytest configuration and shell-script targets for the fuzzer tests."""
import stat

import pytest


@pytest.fixture
def make_target(tmp_path, monkeypatch):
    """Write an executable shell script into a fresh working directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FUZZER_SEED", raising=False)
    monkeypatch.delenv("FUZZER_SEED_NAME", raising=False)
    monkeypatch.delenv("FUZZER_TIMEOUT", raising=False)

    def _make(name, body):
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return "./" + name

    return _make

"""
Shared fixtures: a scripted stand-in for the docker CLI.
"""

import logging
import subprocess
from types import SimpleNamespace

import pytest
from rich.logging import RichHandler


class FakeDocker:
    """Answers docker commands from canned results and records every call."""

    def __init__(self):
        self.installed = True
        self.compose = True
        self.running = True
        self.version = "Docker version 24.0.7, build afdd53b"
        self.version_fails = False
        self.ps_outputs: list[str] = []
        self.up_returncode = 0
        self.query_returncode = 0
        self.query_stdout = ""
        self.query_stderr = ""
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self.sleeps: list[float] = []

    def commands(self, *prefix: str) -> list[list[str]]:
        """Return the recorded calls that start with the given arguments."""
        return [c for c in self.calls if c[:len(prefix)] == list(prefix)]

    def run(self, cmd, check=False, capture_output=False, **kwargs):
        self.calls.append(list(cmd))
        self.kwargs.append(kwargs)
        if not self.installed:
            raise FileNotFoundError(2, "No such file or directory", "docker")

        stdout = ""
        if cmd == ["docker", "--version"]:
            if self.version_fails and capture_output:
                raise OSError("version query failed")
            returncode, stdout = 0, self.version + "\n"
        elif cmd == ["docker", "compose", "version"]:
            returncode = 0 if self.compose else 1
        elif cmd == ["docker", "info"]:
            returncode = 0 if self.running else 1
        elif cmd[:3] == ["docker", "compose", "ps"]:
            returncode = 0
            stdout = self.ps_outputs.pop(0) if self.ps_outputs else ""
        elif cmd[:4] == ["docker", "compose", "up", "-d"]:
            returncode = self.up_returncode
        else:
            raise AssertionError(f"unexpected command: {cmd}")

        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    def popen(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        self.kwargs.append(kwargs)
        if not self.installed:
            raise FileNotFoundError(2, "No such file or directory", "docker")
        fake = self

        class _Process:
            returncode = None

            def communicate(self):
                self.returncode = fake.query_returncode
                return fake.query_stdout, fake.query_stderr

        return _Process()

    def sleep(self, seconds):
        self.sleeps.append(seconds)


@pytest.fixture
def fake_docker(monkeypatch, tmp_path):
    """Route subprocess and sleep calls through a FakeDocker."""
    from pgdock.core import postgres

    docker = FakeDocker()
    monkeypatch.setattr(subprocess, "run", docker.run)
    monkeypatch.setattr(subprocess, "Popen", docker.popen)
    monkeypatch.setattr(postgres, "time", SimpleNamespace(sleep=docker.sleep))
    # Keep a stray pgdock.yaml in the working directory out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PGDOCK_CONFIG", raising=False)
    return docker


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() so handlers do not leak between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)

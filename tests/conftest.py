import subprocess
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import irview_server.services.compiler as compiler_module
from irview_server.main import app


class FakeRustc:
    """Stands in for subprocess.run, recording each command it is given."""

    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []
        self.sources = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        source_path = Path(cmd[-1])
        self.sources.append(source_path.read_text(encoding="utf-8"))
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


def _reset_singletons():
    """Reset all service singletons."""
    compiler_module._compiler = None


@pytest.fixture(autouse=True)
def reset_services():
    _reset_singletons()
    yield
    _reset_singletons()


@pytest.fixture
def fake_rustc(monkeypatch):
    """Replace rustc with a successful fake; tweak attributes per test."""
    fake = FakeRustc(stdout=b"fn main() { }\n")
    monkeypatch.setattr(compiler_module.subprocess, "run", fake)
    return fake


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def temp_sources(monkeypatch):
    """Record every temp source file the compiler creates."""
    created = []
    real_mkstemp = compiler_module.tempfile.mkstemp

    def recording_mkstemp(*args, **kwargs):
        fd, name = real_mkstemp(*args, **kwargs)
        created.append(Path(name))
        return fd, name

    monkeypatch.setattr(compiler_module.tempfile, "mkstemp", recording_mkstemp)
    return created

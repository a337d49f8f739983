import os

import pytest

from network_diagnosis.commands import LINUX
from network_diagnosis.registry import ProbeDefinition, ProbeKind, ProbeRegistry
from network_diagnosis.scheduler import ProbeScheduler


class FakeProc:
    def __init__(self, pid):
        self.pid = pid
        self.returncode = None


class FakeSpawner:
    def __init__(self, first_pid=100):
        self.next_pid = first_pid
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        proc = FakeProc(self.next_pid)
        self.next_pid += 1
        return proc


class FakeReaper:
    """Stands in for os.waitpid(-1, WNOHANG)."""

    def __init__(self):
        self.pending = []
        self.has_children = True

    def exit(self, pid, code):
        self.pending.append((pid, code << 8))

    def kill(self, pid, signum):
        self.pending.append((pid, signum))

    def __call__(self, pid, options):
        assert pid == -1
        assert options == os.WNOHANG
        if self.pending:
            return self.pending.pop(0)
        if not self.has_children:
            raise ChildProcessError(10, "No child processes")
        return 0, 0


@pytest.fixture
def spawner():
    return FakeSpawner()


@pytest.fixture
def reaper():
    return FakeReaper()


@pytest.fixture
def registry():
    return ProbeRegistry(
        [
            ProbeDefinition(ProbeKind.PING, "192.168.1.1"),
            ProbeDefinition(ProbeKind.DNS, "8.8.8.8"),
        ]
    )


@pytest.fixture
def scheduler(registry, spawner, reaper):
    return ProbeScheduler(registry, LINUX, spawn=spawner, reap=reaper)

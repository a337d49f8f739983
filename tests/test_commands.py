import pytest

from network_diagnosis import config
from network_diagnosis.commands import DARWIN, LINUX, resolve_platform_profile
from network_diagnosis.errors import UnsupportedPlatformError
from network_diagnosis.registry import ProbeDefinition, ProbeKind, ProbeRegistry


def test_resolve_profile():
    assert resolve_platform_profile("linux") is LINUX
    assert resolve_platform_profile("darwin") is DARWIN
    with pytest.raises(UnsupportedPlatformError):
        resolve_platform_profile("win32")


def test_darwin_ping_command():
    argv = DARWIN.command_for(ProbeDefinition(ProbeKind.PING, "8.8.4.4"))
    assert argv == ["/sbin/ping", "-n", "-c", "1", "-q", "-t", "5", "8.8.4.4"]
    assert DARWIN.failure_exit_code(ProbeKind.PING) == 2
    assert DARWIN.failure_exit_code(ProbeKind.DNS) == 1


def test_linux_failure_codes():
    assert LINUX.failure_exit_code(ProbeKind.PING) == 1
    assert LINUX.failure_exit_code(ProbeKind.DNS) == 1


def test_default_registry():
    registry = ProbeRegistry.from_pairs(config.DEFAULT_PROBES)
    assert len(registry) == 12
    assert registry[0] == ProbeDefinition(ProbeKind.PING, "192.168.1.1")
    assert registry[len(registry) - 1] == ProbeDefinition(ProbeKind.DNS, "192.168.1.1")
    assert [d.kind.label for d in registry].count("DNS") == 5


def test_definitions_are_immutable():
    definition = ProbeDefinition(ProbeKind.PING, "8.8.8.8")
    with pytest.raises(AttributeError):
        definition.target = "1.1.1.1"

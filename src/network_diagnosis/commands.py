from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional

from . import config
from .errors import UnsupportedPlatformError
from .registry import ProbeDefinition, ProbeKind


@dataclass(frozen=True)
class PlatformProfile:
    """How to run each probe kind on this OS and which exit code means "no reply"."""

    name: str
    ping_path: str
    ping_timeout_flag: str
    ping_failure_exit_code: int
    host_path: str = config.HOST_PATH
    host_failure_exit_code: int = config.HOST_FAILURE_EXIT_CODE

    def command_for(self, definition: ProbeDefinition) -> List[str]:
        if definition.kind is ProbeKind.PING:
            # -n : numeric output
            # -c 1 : one packet
            # -q : quiet
            return [
                self.ping_path,
                "-n",
                "-c",
                "1",
                "-q",
                self.ping_timeout_flag,
                str(config.PROBE_TIMEOUT_SECONDS),
                definition.target,
            ]
        return [
            self.host_path,
            "-t",
            "a",
            config.DNS_QUERY_HOSTNAME,
            definition.target,
        ]

    def failure_exit_code(self, kind: ProbeKind) -> int:
        if kind is ProbeKind.PING:
            return self.ping_failure_exit_code
        return self.host_failure_exit_code


LINUX = PlatformProfile(
    name="linux",
    ping_path=config.LINUX_PING_PATH,
    ping_timeout_flag="-W",
    ping_failure_exit_code=config.LINUX_PING_FAILURE_EXIT_CODE,
)

DARWIN = PlatformProfile(
    name="darwin",
    ping_path=config.DARWIN_PING_PATH,
    ping_timeout_flag="-t",
    ping_failure_exit_code=config.DARWIN_PING_FAILURE_EXIT_CODE,
)


def resolve_platform_profile(platform: Optional[str] = None) -> PlatformProfile:
    """Pick the profile for ``platform`` (defaults to ``sys.platform``)."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return LINUX
    if platform == "darwin":
        return DARWIN
    raise UnsupportedPlatformError(platform)

from __future__ import annotations

from typing import Sequence


class NetworkDiagnosisError(Exception):
    """Fatal condition; the program stops when one is raised."""


class UnsupportedPlatformError(NetworkDiagnosisError):
    def __init__(self, platform: str):
        super().__init__(f"no ping/host settings for platform {platform!r}")
        self.platform = platform


class SpawnError(NetworkDiagnosisError):
    def __init__(self, argv: Sequence[str], cause: OSError):
        super().__init__(f"could not run {argv[0]}: {cause}")
        self.argv = list(argv)
        self.cause = cause


class AbnormalExitError(NetworkDiagnosisError):
    def __init__(self, pid: int, status: int):
        super().__init__(
            f"process {pid} did not terminate normally (wait status {status})"
        )
        self.pid = pid
        self.status = status


class ReapError(NetworkDiagnosisError):
    def __init__(self, cause: OSError):
        super().__init__(f"waitpid failed: {cause}")
        self.cause = cause

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple


class ProbeKind(enum.Enum):
    PING = "ping"
    DNS = "dns"

    @property
    def label(self) -> str:
        return "Ping" if self is ProbeKind.PING else "DNS"


@dataclass(frozen=True)
class ProbeDefinition:
    kind: ProbeKind
    target: str  # IP for pings, DNS server for lookups


class ProbeRegistry:
    """Ordered, read-only list of the probes to run."""

    def __init__(self, definitions: Iterable[ProbeDefinition]):
        self._definitions: Tuple[ProbeDefinition, ...] = tuple(definitions)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[str]]) -> "ProbeRegistry":
        """Build from ``(kind, target)`` pairs such as ``config.DEFAULT_PROBES``."""
        return cls(ProbeDefinition(ProbeKind(kind), target) for kind, target in pairs)

    def __iter__(self) -> Iterator[ProbeDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __getitem__(self, index: int) -> ProbeDefinition:
        return self._definitions[index]

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ProbeRegistry({list(self._definitions)!r})"

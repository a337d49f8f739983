from __future__ import annotations

import enum
import os
import subprocess
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence, Tuple

from . import config
from .commands import PlatformProfile
from .errors import AbnormalExitError, ReapError, SpawnError
from .registry import ProbeDefinition, ProbeKind, ProbeRegistry

Spawner = Callable[..., Any]
Reaper = Callable[[int, int], Tuple[int, int]]


class Outcome(enum.Enum):
    SUCCESS = config.SYMBOL_SUCCESS
    FAIL = config.SYMBOL_FAIL
    UNKNOWN = config.SYMBOL_UNKNOWN
    PENDING = config.SYMBOL_PENDING

    @property
    def symbol(self) -> str:
        return self.value


def classify_exit_code(exit_code: int, failure_exit_code: int) -> Outcome:
    if exit_code == 0:
        return Outcome.SUCCESS
    if exit_code == failure_exit_code:
        return Outcome.FAIL
    return Outcome.UNKNOWN


@dataclass
class ProbeState:
    definition: ProbeDefinition
    failure_exit_code: int
    history: Deque[Outcome] = field(default_factory=deque)
    running: Optional[Any] = None  # process handle while a probe is outstanding
    success_count: int = 0
    failure_count: int = 0
    unknown_count: int = 0
    pending_count: int = 0

    @property
    def kind(self) -> ProbeKind:
        return self.definition.kind

    @property
    def target(self) -> str:
        return self.definition.target

    def record(self, outcome: Outcome):
        self.history.append(outcome)
        if outcome is Outcome.SUCCESS:
            self.success_count += 1
        elif outcome is Outcome.FAIL:
            self.failure_count += 1
        elif outcome is Outcome.UNKNOWN:
            self.unknown_count += 1
        else:
            self.pending_count += 1

    def history_string(self) -> str:
        return "".join(o.symbol for o in self.history)

    def failure_pct(self) -> float:
        completed = self.success_count + self.failure_count + self.unknown_count
        if not completed:
            return 0.0
        return (self.failure_count + self.unknown_count) / completed * 100.0


class ProbeScheduler:
    """Runs every probe as a child process and turns exit codes into history.

    One cycle is ``dispatch_idle_probes()`` followed, an interval later, by
    ``poll_completions()``. Neither call blocks on a child.
    """

    def __init__(
        self,
        registry: ProbeRegistry | Sequence[ProbeDefinition],
        profile: PlatformProfile,
        history_limit: Optional[int] = None,
        spawn: Spawner = subprocess.Popen,
        reap: Reaper = os.waitpid,
    ):
        self.profile = profile
        self._spawn = spawn
        self._reap = reap
        self.states: List[ProbeState] = [
            ProbeState(
                definition,
                failure_exit_code=profile.failure_exit_code(definition.kind),
                history=deque(maxlen=history_limit),
            )
            for definition in registry
        ]
        # pid -> index into self.states, for every outstanding child
        self._running: Dict[int, int] = {}
        self.cycles = 0

    def dispatch_idle_probes(self) -> int:
        """Start one process for every probe that has none outstanding."""
        launched = 0
        for index, state in enumerate(self.states):
            if state.running is not None:
                continue
            argv = self.profile.command_for(state.definition)
            try:
                proc = self._spawn(
                    argv,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            except OSError as exc:
                raise SpawnError(argv, exc) from exc
            state.running = proc
            self._running[proc.pid] = index
            launched += 1
        return launched

    def poll_completions(self) -> List[Tuple[ProbeState, Outcome]]:
        """Reap every child that has already exited and append one symbol per probe.

        Probes whose process is still running get ``Outcome.PENDING``.
        """
        completed: List[Tuple[ProbeState, Outcome]] = []
        finished = set()
        while True:
            try:
                pid, status = self._reap(-1, os.WNOHANG)
            except ChildProcessError:
                break  # no children at all
            except OSError as exc:
                raise ReapError(exc) from exc
            if pid == 0:
                break  # children exist but none have exited
            if not os.WIFEXITED(status):
                raise AbnormalExitError(pid, status)
            exit_code = os.WEXITSTATUS(status)

            index = self._running.pop(pid, None)
            if index is None:
                continue
            state = self.states[index]
            # Already reaped here; keeps subprocess from waiting on the pid again
            state.running.returncode = exit_code
            state.running = None
            outcome = classify_exit_code(exit_code, state.failure_exit_code)
            state.record(outcome)
            completed.append((state, outcome))
            finished.add(index)

        for index, state in enumerate(self.states):
            if index not in finished:
                state.record(Outcome.PENDING)
        self.cycles += 1
        return completed

    def outstanding(self) -> int:
        return len(self._running)

from __future__ import annotations

import sys
import time
from typing import Callable, Optional

from rich.console import Console

from . import config
from .commands import resolve_platform_profile
from .errors import NetworkDiagnosisError
from .registry import ProbeRegistry
from .scheduler import ProbeScheduler
from .ui import TableRenderer, build_summary

console = Console(highlight=False)


def run(
    scheduler: ProbeScheduler,
    renderer: TableRenderer,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: Optional[int] = None,
):
    """Render, dispatch, sleep, poll and rewind until interrupted.

    ``max_cycles`` stops the loop early; the program itself never sets it.
    """
    while max_cycles is None or scheduler.cycles < max_cycles:
        renderer.render()
        scheduler.dispatch_idle_probes()
        sleep(config.CYCLE_INTERVAL_SECONDS)
        scheduler.poll_completions()
        renderer.rewind()


def main():
    renderer = None
    try:
        profile = resolve_platform_profile()
        registry = ProbeRegistry.from_pairs(config.DEFAULT_PROBES)
        scheduler = ProbeScheduler(
            registry, profile, history_limit=config.HISTORY_LIMIT
        )
        renderer = TableRenderer(scheduler.states, console=console)
        run(scheduler, renderer)
    except NetworkDiagnosisError as exc:
        if renderer is not None:
            renderer.release()
        console.print(f"error: {exc}", markup=False)
        sys.exit(1)
    except KeyboardInterrupt:
        if renderer is None:
            return
        renderer.release()
        console.print()
        console.print(build_summary(renderer.states))


if __name__ == "__main__":  # pragma: no cover
    main()

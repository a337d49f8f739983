from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.control import Control
from rich.table import Table
from rich.text import Text

from . import config
from .registry import ProbeDefinition
from .scheduler import Outcome, ProbeState

OUTCOME_STYLES = {
    Outcome.SUCCESS: config.STYLE_SUCCESS,
    Outcome.FAIL: config.STYLE_FAIL,
    Outcome.UNKNOWN: config.STYLE_UNKNOWN,
    Outcome.PENDING: config.STYLE_PENDING,
}


def label_for(definition: ProbeDefinition) -> str:
    return f"{definition.kind.label} {definition.target}"


def column_width(definitions: Iterable[ProbeDefinition]) -> int:
    """Width of the widest label plus room for the colon and a space."""
    return max((len(label_for(d)) for d in definitions), default=0) + 2


def right_string(text: str, width: int) -> str:
    """Return the rightmost ``width`` characters of ``text``."""
    return text[max(len(text) - width, 0):]


def build_row(state: ProbeState, width: int, terminal_width: int) -> Text:
    row = Text(f"{label_for(state.definition)}: ".ljust(width))
    budget = terminal_width - width
    visible = list(state.history)[-budget:] if budget > 0 else []
    for outcome in visible:
        row.append(outcome.symbol, style=OUTCOME_STYLES[outcome])
    return row


class TableRenderer:
    """Draws one line per probe and then moves back up to redraw in place."""

    def __init__(
        self,
        states: Sequence[ProbeState],
        console: Optional[Console] = None,
        terminal_width: int = config.TERMINAL_WIDTH,
    ):
        self.states = states
        self.console = console or Console(highlight=False)
        self.terminal_width = terminal_width
        self.column_width = column_width(s.definition for s in states)
        self._lines_drawn = 0
        self._lines_above = 0  # frame lines below the cursor after a rewind

    def render(self):
        for state in self.states:
            self.console.print(
                build_row(state, self.column_width, self.terminal_width),
                no_wrap=True,
                overflow="crop",
                highlight=False,
            )
        self._lines_drawn = len(self.states)
        self._lines_above = 0

    def rewind(self):
        """Put the cursor back on the first line of the last frame."""
        if self._lines_drawn:
            self.console.control(Control.move(0, -self._lines_drawn))
            self._lines_above = self._lines_drawn
            self._lines_drawn = 0

    def release(self):
        """Move the cursor below the last frame so later output does not overwrite it."""
        for _ in range(self._lines_above):
            self.console.print()
        self._lines_above = 0


def build_summary(states: Iterable[ProbeState]) -> Table:
    table = Table(
        title="Summary",
        box=box.MINIMAL_DOUBLE_HEAD,
        caption_style="bold",
    )
    table.add_column("Probe", style="bold")
    table.add_column("Success")
    table.add_column("Fail")
    table.add_column("Unknown")
    table.add_column("Pending")
    table.add_column("Fail %")

    for st in states:
        table.add_row(
            label_for(st.definition),
            str(st.success_count),
            str(st.failure_count),
            str(st.unknown_count),
            str(st.pending_count),
            f"{st.failure_pct():.0f}",
        )
    table.caption = (
        f"{config.SYMBOL_SUCCESS} ok  {config.SYMBOL_FAIL} no reply  "
        f"{config.SYMBOL_UNKNOWN} unexpected exit code  {config.SYMBOL_PENDING} pending"
    )
    return table

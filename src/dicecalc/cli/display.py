"""Rich terminal display for roll results."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from dicecalc.models.roll import DieKind, RollResult

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

# "always" keeps the bold total even when stdout is piped.
_COLOR_MODES = {
    "always": {"force_terminal": True, "color_system": "standard"},
    "never": {"color_system": None},
}

_FUDGE_SYMBOLS = {-1: "-", 0: "0", 1: "+"}


def format_die(value: int, kind: DieKind) -> str:
    if kind == DieKind.FUDGE:
        return _FUDGE_SYMBOLS.get(value, "0")
    return str(value)


def format_modifier(modifier: int) -> str:
    return f"{modifier:+d}"


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """Build a console for a display.color setting: auto, always or never."""
    if color not in _COLOR_MODES:
        if color != "auto":
            logger.warning("Unknown display.color %r, using auto.", color)
        return err_console if stderr else console
    return Console(stderr=stderr, highlight=False, soft_wrap=True, **_COLOR_MODES[color])


def format_number(value: float) -> str:
    """Shortest plain rendering of an average: 7, 15.5, -0.5."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


class Display:
    def __init__(
        self,
        out: Console | None = None,
        err: Console | None = None,
        label_width: int = 10,
        color: str = "auto",
    ):
        self.console = out or make_console(color)
        self.err_console = err or make_console(color, stderr=True)
        self.label_width = label_width

    def _print(self, text: str = "") -> None:
        # One physical line per label, however long the pool gets.
        self.console.print(text, soft_wrap=True)

    def _line(self, label: str, value: str) -> str:
        return f"  {label:<{self.label_width}} {value}"

    def roll_lines(self, result: RollResult) -> list[str]:
        """Pool, optional Kept and Modifier lines, and the bold Total line."""
        kind = result.spec.kind
        pool = result.pool
        if result.filtered:
            # Show the pool in selection order so the kept dice read as its prefix.
            pool = sorted(pool, reverse=result.policy.highest)

        lines = [self._line("Pool:", ", ".join(format_die(v, kind) for v in pool))]
        if result.filtered:
            lines.append(self._line("Kept:", ", ".join(format_die(v, kind) for v in result.kept)))
        if result.spec.modifier != 0:
            lines.append(self._line("Modifier:", format_modifier(result.spec.modifier)))
        lines.append(self._line("Total:", f"[bold]{result.total}[/bold]"))
        return lines

    def show_roll_header(self, index: int) -> None:
        self._print()
        self._print(f"--- Roll {index} ---")

    def show_roll(self, result: RollResult, quiet: bool = False) -> None:
        if quiet:
            self._print(str(result.total))
            return
        self._print()
        for line in self.roll_lines(result):
            self._print(line)

    def show_average(self, value: float, quiet: bool = False) -> None:
        if quiet:
            self._print(format_number(value))
            return
        self._print()
        self._print(f"  Average: {value:.2f}")

    def show_error(self, message: str) -> None:
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)

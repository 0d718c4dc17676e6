"""Tests for src/dicecalc/cli/display.py."""
from __future__ import annotations

import io

import pytest
from rich.console import Console

from dicecalc.cli import display as display_module
from dicecalc.cli.display import Display, format_die, format_modifier, format_number, make_console
from dicecalc.mechanics.notation import parse_notation
from dicecalc.models.roll import DieKind, KeepPolicy, RollResult


def _result(expr, pool, kept=None, highest=True):
    spec = parse_notation(expr)
    kept = list(pool) if kept is None else kept
    return RollResult(
        spec=spec,
        pool=pool,
        kept=kept,
        policy=KeepPolicy(count=len(kept), highest=highest),
        total=sum(kept) + spec.modifier,
    )


class TestFormatDie:
    @pytest.mark.parametrize("value, expected", [(-1, "-"), (0, "0"), (1, "+")])
    def test_fudge_symbols(self, value, expected):
        assert format_die(value, DieKind.FUDGE) == expected

    @pytest.mark.parametrize("value", [1, 6, 20, 100])
    def test_standard_decimal(self, value):
        assert format_die(value, DieKind.STANDARD) == str(value)


class TestFormatNumbers:
    @pytest.mark.parametrize("modifier, expected", [(3, "+3"), (-2, "-2"), (0, "+0")])
    def test_modifier(self, modifier, expected):
        assert format_modifier(modifier) == expected

    @pytest.mark.parametrize("value, expected", [(7.0, "7"), (15.5, "15.5"), (0.0, "0"), (-0.5, "-0.5"), (10.0, "10")])
    def test_number(self, value, expected):
        assert format_number(value) == expected


class TestRollLines:
    def test_plain_roll(self):
        lines = Display().roll_lines(_result("2d6", [3, 5]))
        assert lines == [
            "  Pool:      3, 5",
            "  Total:     [bold]8[/bold]",
        ]

    def test_modifier_line(self):
        lines = Display().roll_lines(_result("3d6-2", [1, 2, 3]))
        assert "  Modifier:  -2" in lines
        assert lines[-1] == "  Total:     [bold]4[/bold]"

    def test_kept_line_only_when_filtered(self):
        lines = Display().roll_lines(_result("4d6", [2, 6, 4, 1], kept=[6, 4, 2]))
        assert lines[0] == "  Pool:      6, 4, 2, 1"
        assert lines[1] == "  Kept:      6, 4, 2"

    def test_lowest_pool_sorted_ascending(self):
        lines = Display().roll_lines(_result("3d6", [5, 1, 3], kept=[1], highest=False))
        assert lines[0] == "  Pool:      1, 3, 5"
        assert lines[1] == "  Kept:      1"

    def test_fudge_pool(self):
        lines = Display().roll_lines(_result("4dF", [1, -1, 0, 1]))
        assert lines[0] == "  Pool:      +, -, 0, +"
        assert lines[-1] == "  Total:     [bold]1[/bold]"

    def test_label_width(self):
        lines = Display(label_width=6).roll_lines(_result("1d6", [4]))
        assert lines[0] == "  Pool:  4"


class TestShow:
    def test_show_roll(self, buffer_display):
        display, out, _ = buffer_display
        display.show_roll(_result("1d20+5", [12]))
        text = out.getvalue()
        assert "Pool:      12" in text
        assert "Modifier:  +5" in text
        assert "Total:     17" in text
        assert "Kept:" not in text

    def test_show_roll_quiet(self, buffer_display):
        display, out, _ = buffer_display
        display.show_roll(_result("2d6", [3, 5]), quiet=True)
        assert out.getvalue() == "8\n"

    def test_show_average(self, buffer_display):
        display, out, _ = buffer_display
        display.show_average(7.0)
        assert out.getvalue() == "\n  Average: 7.00\n"

    def test_show_average_quiet(self, buffer_display):
        display, out, _ = buffer_display
        display.show_average(15.5, quiet=True)
        assert out.getvalue() == "15.5\n"

    def test_show_roll_header(self, buffer_display):
        display, out, _ = buffer_display
        display.show_roll_header(2)
        assert out.getvalue() == "\n--- Roll 2 ---\n"

    def test_show_error_goes_to_stderr(self, buffer_display):
        display, out, err = buffer_display
        display.show_error("Invalid dice format! Use XdX or XdF (got '[x]')")
        assert out.getvalue() == ""
        assert "Error: Invalid dice format!" in err.getvalue()
        assert "[x]" in err.getvalue()

    def test_long_pool_not_wrapped(self):
        out = io.StringIO()
        display = Display(out=Console(file=out, highlight=False, width=40, force_terminal=False))
        display.show_roll(_result("30d20", [17] * 30))
        lines = out.getvalue().splitlines()
        assert lines[1] == "  Pool:      " + ", ".join(["17"] * 30)
        assert lines[2] == "  Total:     510"
        assert len(lines) == 3


class TestMakeConsole:
    def test_auto_uses_module_console(self):
        assert make_console("auto") is display_module.console
        assert make_console("auto", stderr=True) is display_module.err_console

    def test_always_forces_terminal(self):
        assert make_console("always").is_terminal is True

    def test_never_has_no_color_system(self):
        assert make_console("never").color_system is None

    def test_unknown_falls_back_to_auto(self, caplog):
        assert make_console("rainbow") is display_module.console
        assert "rainbow" in caplog.text

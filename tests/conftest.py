"""Shared fixtures for the dicecalc test suite."""
from __future__ import annotations

import io
import random

import pytest
from rich.console import Console

from dicecalc.cli.display import Display


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)


@pytest.fixture
def scripted_rolls(monkeypatch):
    """Replace random.randint with a fixed sequence of draws.

    Usage: ``scripted_rolls([6, 6, 2])``. Draws are checked against the
    requested range so a bad script fails loudly.
    """
    def install(values):
        draws = iter(values)

        def fake_randint(lo, hi):
            value = next(draws)
            assert lo <= value <= hi, f"scripted draw {value} outside {lo}..{hi}"
            return value

        monkeypatch.setattr(random, "randint", fake_randint)

    return install


@pytest.fixture
def buffer_display():
    out = io.StringIO()
    err = io.StringIO()
    display = Display(
        out=Console(file=out, highlight=False, width=200, force_terminal=False),
        err=Console(file=err, highlight=False, width=200, force_terminal=False),
    )
    return display, out, err

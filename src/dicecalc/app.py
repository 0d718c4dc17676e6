"""Application bootstrap: wires parsing, validation, rolling and display."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dicecalc.engine.validators import validate_options
from dicecalc.mechanics import dice
from dicecalc.mechanics.notation import DEFAULT_MAX_DICE, parse_notation
from dicecalc.models.roll import RollOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml, falling back to an empty config when it is absent."""
    import tomllib

    config_path = path or DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    if path is not None:
        logger.warning("Config file %s not found, using defaults.", path)
    return {}


class DiceApp:
    """Runs one invocation of the calculator: parse, validate, evaluate, print."""

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config if config is not None else load_config()
        self._display = None

    @property
    def max_dice(self) -> int:
        return int(self.config.get("roll", {}).get("max_dice", DEFAULT_MAX_DICE))

    @property
    def display(self):
        if self._display is None:
            from dicecalc.cli.display import Display

            display_cfg = self.config.get("display", {})
            self._display = Display(
                label_width=display_cfg.get("label_width", 10),
                color=display_cfg.get("color", "auto"),
            )
        return self._display

    def run(self, notation: str, options: RollOptions) -> None:
        validate_options(options)
        spec = parse_notation(notation, max_dice=self.max_dice)

        if options.average:
            self.display.show_average(dice.average(spec), quiet=options.quiet)
            return

        results = dice.roll_many(spec, options)
        show_headers = not options.quiet and len(results) > 1
        for i, result in enumerate(results, start=1):
            if show_headers:
                self.display.show_roll_header(i)
            self.display.show_roll(result, quiet=options.quiet)

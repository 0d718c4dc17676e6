"""Command-line dice-rolling calculator."""

__version__ = "0.1.0"

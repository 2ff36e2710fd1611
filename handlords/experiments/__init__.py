"""Headless experiment entrypoints."""

from handlords.experiments.run import main

__all__ = ["main"]

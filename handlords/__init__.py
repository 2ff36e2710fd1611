"""Handlords: a deterministic rock-paper-scissors territory automaton."""

__version__ = "0.1.0"

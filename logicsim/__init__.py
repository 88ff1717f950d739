"""Cycle-based digital logic simulator for circuits described in plain text."""

__version__ = "0.1.0"
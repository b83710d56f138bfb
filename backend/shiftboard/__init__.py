"""Shiftboard: weekly shift scheduling backend."""

__version__ = "0.1.0"

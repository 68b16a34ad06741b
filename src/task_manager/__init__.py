"""Keyboard-driven terminal task list."""

__version__ = "0.1.0"

"""Quantum circuit simulation from plain-text state and circuit files."""

__version__ = "0.1.0"
"""Pharmaceutical import and distribution order tracking backend."""

__version__ = "0.1.0"

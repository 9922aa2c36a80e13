"""Retirement savings projection engine with text/HTML reporting."""

__version__ = "0.1.0"

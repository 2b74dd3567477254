"""Runnable examples of classic object-oriented design patterns."""

__version__ = "0.1.0"
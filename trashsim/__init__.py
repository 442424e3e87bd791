"""Threaded simulation of smart trash cans, garbage loading and garbage collection."""

__version__ = "0.1.0"
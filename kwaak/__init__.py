"""Core of a terminal front end for autonomous coding agents."""

__version__ = "0.10.0"
"""Simplified UNO against a scripted computer opponent."""

__version__ = "0.1.0"

"""Tangent - native file bridge for the Tangent notebook desktop app."""

__version__ = "0.1.0"

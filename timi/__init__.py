"""Timi -- yes/no team-type quiz scoring engine."""

__version__ = "0.1.0"

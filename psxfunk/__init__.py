"""Rhythm-game engine pieces and console hardware format helpers."""

__version__ = "0.1.0"
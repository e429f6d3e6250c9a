"""Melodies, MIDI note output and a touch screen model for a crank-driven music box."""

__version__ = "0.1.0"
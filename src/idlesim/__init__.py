"""Combat balance simulator for idle adventure routes."""

__version__ = "0.1.0"

"""FinTrack - personal finance tracking with monthly analytics."""

__version__ = "0.1.0"

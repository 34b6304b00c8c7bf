"""melclock — live MEL repair-deadline calculator."""

__version__ = "0.1.0"

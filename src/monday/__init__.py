"""Monday: a personal task tracker driven by short text commands."""

__version__ = "1.0.0"

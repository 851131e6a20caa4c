"""Single-user console task list with flat-file persistence."""

__version__ = "0.1.0"

"""Single-user task list with local persistence."""

__version__ = "0.1.0"

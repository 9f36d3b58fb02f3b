"""questbook: in-memory model layer for a tutor's record-keeping desktop app."""

__version__ = "0.1.0"

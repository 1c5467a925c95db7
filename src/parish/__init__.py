"""Parish - authorization and scheduling service for church administration."""

__version__ = "0.1.0"

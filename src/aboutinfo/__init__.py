"""Product about metadata resolution."""

__version__ = "0.3.0"

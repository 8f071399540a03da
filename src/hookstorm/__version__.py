"""Version information for hookstorm."""

__version__ = "0.1.0"

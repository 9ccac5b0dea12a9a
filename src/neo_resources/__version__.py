"""Version information for neo-resources."""

__version__ = "0.1.0"

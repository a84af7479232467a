"""
errors.py: Exception types raised by flappy_loop.
"""


class FlappyError(Exception):
    """Base class for all flappy_loop errors."""


class ConfigError(FlappyError, ValueError):
    """Raised when a configuration value is missing, malformed or out of range."""

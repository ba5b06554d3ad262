"""Classic algorithm patterns and threaded producer/consumer demos as small Python functions."""

__version__ = "0.1.0"
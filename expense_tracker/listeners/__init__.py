"""Mini README: Ready-made listeners for the expense tracker model."""

from .logging_listener import LoggingListener

__all__ = ["LoggingListener"]

"""schedulsy - personal task tracking with live progress metrics."""

__version__ = "0.1.0"

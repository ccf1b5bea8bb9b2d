"""A grid sandbox where a PID-controlled bot follows an A* path through obstacles and wind."""

__version__ = "0.1.0"
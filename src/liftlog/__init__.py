"""liftlog: workout logging with Setgraph history import."""

__version__ = "0.1.0"

"""BlueRange device control sample."""

__version__ = "1.0.0"

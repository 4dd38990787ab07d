"""ChillFlow - a focus cycle timer with weekly session statistics."""

__version__ = "0.1.0"

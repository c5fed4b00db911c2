"""dayplan: in-memory console scheduler for a single day's tasks."""

__version__ = "0.1.0"

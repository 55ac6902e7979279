"""rosa-ops: list cluster instance types and show account identity."""

__version__ = "1.0.0"

"""Resolve which factory and generator turn aggregates into artifacts."""

__version__ = "0.1.0"

"""Composable geometry nodes over path-based vector scene data."""

__version__ = "0.1.0"

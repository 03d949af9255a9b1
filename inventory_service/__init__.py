"""Inventory tracking service with per-item photos."""

__version__ = "0.1.0"

"""Docking layout model: surfaces, binary split trees, nodes, tabs and window state."""

__version__ = "0.1.0"
"""Manage a file of integers: fill, sort, and search it linearly or by binary search."""

__version__ = "0.1.0"
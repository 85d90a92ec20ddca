"""Persistent fringe trees held in the leaves of a binary tree, with dot output and small demo commands."""

__version__ = "0.1.0"
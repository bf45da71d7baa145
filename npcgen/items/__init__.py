"""
Items system module for npcgen.

This module contains equipment definitions: items granting features and
declaring stat and armor class changes.
"""

from .item import Item

__all__ = [
    # Import from item.py
    "Item",
]

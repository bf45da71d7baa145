"""
Actions module for npcgen.

This module contains the static records for features and the actions and
reactions they grant.
"""

from .action import Action
from .feature import Feature

__all__ = [
    # Import from action.py
    "Action",
    # Import from feature.py
    "Feature",
]

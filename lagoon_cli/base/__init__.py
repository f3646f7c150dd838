"""
Lagoon CLI Base Command Classes

Abstract base classes for consistent command structure.
"""

from .base_command import BaseCommand
from .lagoon_command import LagoonCommand

__all__ = [
    "BaseCommand",
    "LagoonCommand",
]

"""
Shared utilities for readmegen.

Common functionality used across contexts:
- Logger configuration
- Generic list reordering
"""

from readmegen.utils.ordering import move_item, shift_item

__all__ = ["move_item", "shift_item"]

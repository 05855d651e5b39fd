"""
Interval Tree Core Module

This module provides the indexed interval storage:
- Interval value and its validation error (interval.py)
- Red-black nodes and rebalancing primitives (node.py)
- The interval tree with its queries (interval_tree.py)
- Configuration parsing (config.py)
"""

from .interval import Interval, InvalidIntervalError
from .interval_tree import RedBlackIntervalTree, Status, set_debug
from .config import Config

__all__ = [
    'Interval',
    'InvalidIntervalError',
    'RedBlackIntervalTree',
    'Status',
    'set_debug',
    'Config',
]

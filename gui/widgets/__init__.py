"""
Interval Tree Inspector GUI Widgets

Custom widgets for displaying tree data.
"""

from .tree_widget import IntervalTreeView

__all__ = ['IntervalTreeView']

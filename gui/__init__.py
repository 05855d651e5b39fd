"""
Interval Tree Inspector GUI Module

PySide6-based graphical interface for exploring the interval tree.
"""

from .main_window import MainWindow

__all__ = ['MainWindow']

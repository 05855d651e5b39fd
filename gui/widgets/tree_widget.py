"""
Structural view of a red-black interval tree.

Shows one row per node, nested the way the nodes are linked, with the
cached max/count fields and the node color.
"""

from typing import Optional

from PySide6.QtWidgets import QTreeWidget, QTreeWidgetItem, QHeaderView
from PySide6.QtGui import QBrush, QColor, QFont

from itree.config import ColorsConfig
from itree.interval import Interval
from itree.interval_tree import RedBlackIntervalTree
from itree.node import Node, RED


class IntervalTreeView(QTreeWidget):
    """Tree widget mirroring the node structure of a RedBlackIntervalTree."""

    COLUMNS = ["Link", "Interval", "Max", "Count", "Color"]

    def __init__(self, colors: Optional[ColorsConfig] = None, parent=None):
        super().__init__(parent)
        self._colors = colors or ColorsConfig()
        self.setColumnCount(len(self.COLUMNS))
        self.setHeaderLabels(self.COLUMNS)
        self.header().setSectionResizeMode(QHeaderView.ResizeToContents)
        self.setUniformRowHeights(True)

    def refresh(self, tree: RedBlackIntervalTree, highlight: Optional[list[Interval]] = None):
        """Rebuild all rows from tree; rows whose interval is in highlight are marked."""
        self.clear()
        marked = set(highlight or [])
        if tree.root is not None:
            self._add_node(None, "root", tree.root, marked)
        self.expandAll()

    def node_count(self) -> int:
        """Number of node rows currently shown."""
        def _count(item):
            return 1 + sum(_count(item.child(i)) for i in range(item.childCount()))
        return sum(_count(self.topLevelItem(i)) for i in range(self.topLevelItemCount()))

    def _add_node(self, parent_item: Optional[QTreeWidgetItem], link: str, node: Node, marked: set):
        color_name = "RED" if node.color == RED else "BLACK"
        values = [link, str(node.interval), str(node.max), str(node.count), color_name]
        if parent_item is None:
            item = QTreeWidgetItem(self, values)
        else:
            item = QTreeWidgetItem(parent_item, values)

        fg = QBrush(QColor(self._colors.red_node if node.color == RED else self._colors.black_node))
        for column in range(len(self.COLUMNS)):
            item.setForeground(column, fg)

        if node.interval in marked:
            bg = QBrush(QColor(self._colors.highlight_background))
            font = QFont(self.font())
            font.setBold(True)
            for column in range(len(self.COLUMNS)):
                item.setBackground(column, bg)
                item.setFont(column, font)

        if node.left is not None:
            self._add_node(item, "L", node.left, marked)
        if node.right is not None:
            self._add_node(item, "R", node.right, marked)

"""
Main Window for the Interval Tree Inspector.

Toolbar for entering intervals and running queries, a structural view of
the tree, a text dump of the tree and a status bar reporting each outcome.
"""

import io
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QToolBar, QPushButton, QLabel, QSpinBox,
    QSplitter, QStatusBar, QPlainTextEdit, QApplication
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from itree.config import Config
from itree.interval import Interval
from itree.interval_tree import RedBlackIntervalTree, Status

from .widgets.tree_widget import IntervalTreeView

# QSpinBox holds a signed 32-bit int
SPIN_MIN = -2**31
SPIN_MAX = 2**31 - 1


class MainWindow(QMainWindow):
    """
    Main application window.

    Contains:
    - Toolbar with interval/point inputs and operation buttons
    - Structural tree view (left) and text dump (right)
    - Status bar with the result of the last operation
    """

    def __init__(self, config: Config, tree: Optional[RedBlackIntervalTree] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.tree = tree if tree is not None else RedBlackIntervalTree(verify=config.verify_integrity)

        self._interface_font = QFont(config.layout.interface_font, config.layout.interface_font_size)
        self._text_font = QFont(config.layout.text_font, config.layout.text_font_size)

        self._setup_window()
        self._setup_ui()
        self._setup_toolbar()
        self._setup_statusbar()

        self._refresh()

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle(self.config.labels.window_title)
        self.setMinimumSize(640, 400)
        self.resize(1000, 700)

    def _setup_ui(self):
        """Set up the main UI layout."""
        self._splitter = QSplitter(Qt.Horizontal)

        self._tree_view = IntervalTreeView(self.config.colors)
        self._tree_view.setFont(self._interface_font)
        self._splitter.addWidget(self._tree_view)

        self._dump_view = QPlainTextEdit()
        self._dump_view.setReadOnly(True)
        self._dump_view.setFont(self._text_font)
        self._dump_view.setLineWrapMode(QPlainTextEdit.NoWrap)
        self._splitter.addWidget(self._dump_view)

        self._splitter.setSizes([500, 500])
        self.setCentralWidget(self._splitter)

    def _make_spin(self, value: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setFont(self._interface_font)
        spin.setRange(SPIN_MIN, SPIN_MAX)
        spin.setValue(value)
        return spin

    def _make_button(self, text: str, tooltip: str, slot) -> QPushButton:
        button = QPushButton(text)
        button.setFont(self._interface_font)
        button.setToolTip(tooltip)
        button.clicked.connect(slot)
        return button

    def _setup_toolbar(self):
        """Set up the operations toolbar."""
        labels = self.config.labels
        toolbar = QToolBar("Operations")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        # === Interval inputs ===
        toolbar.addWidget(QLabel(labels.field_start))
        self._start_spin = self._make_spin(0)
        toolbar.addWidget(self._start_spin)
        toolbar.addWidget(QLabel(labels.field_end))
        self._end_spin = self._make_spin(0)
        toolbar.addWidget(self._end_spin)

        self._insert_btn = self._make_button(labels.button_insert, "Insert [start, end]", self._on_insert)
        toolbar.addWidget(self._insert_btn)
        self._delete_btn = self._make_button(labels.button_delete, "Delete [start, end]", self._on_delete)
        toolbar.addWidget(self._delete_btn)
        self._overlapping_btn = self._make_button(
            labels.button_overlapping, "Find intervals overlapping [start, end]", self._on_overlapping)
        toolbar.addWidget(self._overlapping_btn)

        toolbar.addSeparator()

        # === Point input ===
        toolbar.addWidget(QLabel(labels.field_point))
        self._point_spin = self._make_spin(0)
        toolbar.addWidget(self._point_spin)
        self._containing_btn = self._make_button(
            labels.button_containing, "Find intervals containing the point", self._on_containing)
        toolbar.addWidget(self._containing_btn)

        toolbar.addSeparator()

        self._max_overlap_btn = self._make_button(
            labels.button_max_overlap, "Find the interval overlapping the most others", self._on_max_overlap)
        toolbar.addWidget(self._max_overlap_btn)
        self._clear_btn = self._make_button(labels.button_clear, "Remove all intervals", self._on_clear)
        toolbar.addWidget(self._clear_btn)
        self._quit_btn = self._make_button(labels.button_quit, "Exit application", self.close)
        toolbar.addWidget(self._quit_btn)

    def _setup_statusbar(self):
        """Set up the status bar."""
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready")

    # ==================== Tree Display ====================

    def _refresh(self, highlight: Optional[list[Interval]] = None):
        """Redraw the structural view and the text dump."""
        self._tree_view.refresh(self.tree, highlight)
        buffer = io.StringIO()
        self.tree.print_tree(file=buffer, indent=self.config.printer.indent)
        self._dump_view.setPlainText(buffer.getvalue())

    def _show_status(self, message: str):
        self._statusbar.setStyleSheet("")
        self._statusbar.showMessage(message)

    def _show_error(self, message: str):
        self._statusbar.setStyleSheet(f"color: {self.config.colors.error_text};")
        self._statusbar.showMessage(message)

    def _current_interval(self) -> tuple[int, int]:
        return self._start_spin.value(), self._end_spin.value()

    @staticmethod
    def _format_intervals(intervals: list[Interval]) -> str:
        if not intervals:
            return "none"
        return ", ".join(str(i) for i in sorted(intervals, key=lambda i: i.start))

    # ==================== Operations ====================

    def _on_insert(self):
        start, end = self._current_interval()
        if self.tree.insert(start, end) == Status.INVALID_INTERVAL:
            self._show_error(f"Invalid interval [{start}, {end}]: start is greater than end")
            return
        self._refresh()
        self._show_status(f"Inserted [{start}, {end}], {len(self.tree)} intervals")

    def _on_delete(self):
        start, end = self._current_interval()
        if (start, end) not in self.tree and start <= end:
            self._show_status(f"[{start}, {end}] is not stored")
            return
        if self.tree.delete(start, end) == Status.INVALID_INTERVAL:
            self._show_error(f"Invalid interval [{start}, {end}]: start is greater than end")
            return
        self._refresh()
        self._show_status(f"Deleted [{start}, {end}], {len(self.tree)} intervals")

    def _on_overlapping(self):
        start, end = self._current_interval()
        found = self.tree.find_overlapping(start, end)
        if self.tree.last_status == Status.INVALID_INTERVAL:
            self._show_error(f"Invalid interval [{start}, {end}]: start is greater than end")
            return
        self._refresh(found)
        self._show_status(f"Overlapping [{start}, {end}]: {self._format_intervals(found)}")

    def _on_containing(self):
        point = self._point_spin.value()
        found = self.tree.find_containing(point)
        self._refresh(found)
        self._show_status(f"Containing {point}: {self._format_intervals(found)}")

    def _on_max_overlap(self):
        best = self.tree.find_max_overlapping()
        if best is None:
            self._refresh()
            self._show_status("Tree is empty")
            return
        self._refresh([best])
        self._show_status(f"Max overlap: {best} overlaps {self.tree.count_overlaps(best.start, best.end)} intervals")

    def _on_clear(self):
        self.tree.clear()
        self._refresh()
        self._show_status("Cleared")


def apply_application_font(config: Config):
    """Use the configured text font as application default."""
    QApplication.instance().setFont(QFont(config.layout.text_font, config.layout.text_font_size))

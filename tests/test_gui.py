import pytest

pytest.importorskip("PySide6")
pytest.importorskip("pytestqt")

from PySide6.QtCore import Qt

from gui.main_window import MainWindow
from gui.widgets.tree_widget import IntervalTreeView
from itree.config import Config
from itree.interval_tree import RedBlackIntervalTree


@pytest.fixture
def window(qtbot):
    tree = RedBlackIntervalTree(verify=True)
    for start, end in [(1, 5), (3, 7), (10, 15)]:
        tree.insert(start, end)
    w = MainWindow(Config(), tree)
    qtbot.addWidget(w)
    return w


def set_interval(window, start, end):
    window._start_spin.setValue(start)
    window._end_spin.setValue(end)


def test_view_shows_every_node(window):
    assert window._tree_view.node_count() == 3
    root = window._tree_view.topLevelItem(0)
    assert root.text(1) == "[3, 7]"
    assert root.text(2) == "15"
    assert root.text(4) == "BLACK"
    assert "[10, 15] (max: 15, color: BLACK)" in window._dump_view.toPlainText()


def test_insert_button(window, qtbot):
    set_interval(window, 20, 25)
    qtbot.mouseClick(window._insert_btn, Qt.LeftButton)
    assert (20, 25) in window.tree
    assert window._tree_view.node_count() == 4
    assert "Inserted [20, 25]" in window.statusBar().currentMessage()


def test_insert_invalid_interval_shows_error(window, qtbot):
    set_interval(window, 9, 2)
    qtbot.mouseClick(window._insert_btn, Qt.LeftButton)
    assert len(window.tree) == 3
    assert "Invalid interval [9, 2]" in window.statusBar().currentMessage()


def test_delete_button(window, qtbot):
    set_interval(window, 3, 7)
    qtbot.mouseClick(window._delete_btn, Qt.LeftButton)
    assert (3, 7) not in window.tree
    assert window._tree_view.node_count() == 2


def test_delete_absent_interval(window, qtbot):
    set_interval(window, 3, 8)
    qtbot.mouseClick(window._delete_btn, Qt.LeftButton)
    assert len(window.tree) == 3
    assert "not stored" in window.statusBar().currentMessage()


def test_containing_button(window, qtbot):
    window._point_spin.setValue(6)
    qtbot.mouseClick(window._containing_btn, Qt.LeftButton)
    assert window.statusBar().currentMessage() == "Containing 6: [3, 7]"


def test_overlapping_button(window, qtbot):
    set_interval(window, 4, 11)
    qtbot.mouseClick(window._overlapping_btn, Qt.LeftButton)
    assert window.statusBar().currentMessage() == "Overlapping [4, 11]: [1, 5], [3, 7], [10, 15]"


def test_max_overlap_and_clear(window, qtbot):
    qtbot.mouseClick(window._max_overlap_btn, Qt.LeftButton)
    assert window.statusBar().currentMessage().startswith("Max overlap: [")
    qtbot.mouseClick(window._clear_btn, Qt.LeftButton)
    assert window.tree.is_empty()
    assert window._tree_view.node_count() == 0
    qtbot.mouseClick(window._max_overlap_btn, Qt.LeftButton)
    assert window.statusBar().currentMessage() == "Tree is empty"


def test_tree_view_highlights_matches(qtbot):
    tree = RedBlackIntervalTree()
    tree.insert(1, 2)
    tree.insert(5, 9)
    view = IntervalTreeView()
    qtbot.addWidget(view)
    view.refresh(tree, tree.find_containing(6))
    items = [view.topLevelItem(0)] + [view.topLevelItem(0).child(i) for i in range(view.topLevelItem(0).childCount())]
    bold = [item.text(1) for item in items if item.font(1).bold()]
    assert bold == ["[5, 9]"]

"""
Left-leaning red-black interval tree.

Intervals are keyed by their start; at most one interval is stored per start.
Each node caches the maximum end point and the number of intervals in its
subtree, which lets the overlap and stabbing queries skip whole subtrees.

Invalid intervals (start > end) never reach the tree: the public operations
report them on stderr, record Status.INVALID_INTERVAL in ``last_status`` and
leave the tree unchanged.
"""

import sys
from datetime import datetime
from enum import Enum
from typing import Iterator, Optional, TextIO, Union

from .interval import Interval, InvalidIntervalError
from .node import (
    RED, BLACK, Node, is_red, max_end, size, fix_up, balance,
    rotate_right, move_red_left, move_red_right, min_node, delete_min
)

_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn per-operation trace output on stderr on or off."""
    global _debug_enabled
    _debug_enabled = enabled


def _debug_print(msg: str) -> None:
    if not _debug_enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] ITREE: {msg}", file=sys.stderr)


def _error_print(msg: str) -> None:
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] ITREE: {msg}", file=sys.stderr)


class Status(Enum):
    """Outcome of a public tree operation."""
    OK = "ok"
    INVALID_INTERVAL = "invalid_interval"


class RedBlackIntervalTree:
    def __init__(self, verify: bool = False):
        self.root: Optional[Node] = None
        self.last_status: Status = Status.OK
        # Run verify_integrity() after every mutation
        self._verify = verify

    # --- Container Protocol ---

    def __len__(self) -> int:
        return size(self.root)

    def __iter__(self) -> Iterator[Interval]:
        """Yield stored intervals in ascending start order."""
        stack: list[Node] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.interval
            node = node.right

    def __contains__(self, item: Union[Interval, tuple[int, int]]) -> bool:
        start, end = (item.start, item.end) if isinstance(item, Interval) else item
        node = self._get(start)
        return node is not None and node.interval.end == end

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        def _height(node):
            if not node: return 0
            return 1 + max(_height(node.left), _height(node.right))
        return _height(self.root)

    def clear(self):
        self.root = None
        self.last_status = Status.OK

    def _get(self, start: int) -> Optional[Node]:
        node = self.root
        while node:
            if start < node.start: node = node.left
            elif start > node.start: node = node.right
            else: return node
        return None

    # --- Insertion ---

    def insert(self, start: int, end: int) -> Status:
        """
        Store [start, end].

        If an interval with the same start is already stored, its end is
        grown to ``end`` when ``end`` is larger; otherwise nothing changes.
        """
        try:
            interval = Interval(start, end)
        except InvalidIntervalError as e:
            _error_print(f"Error inserting interval: {e}")
            self.last_status = Status.INVALID_INTERVAL
            return self.last_status

        self.root = self._insert(self.root, interval)
        self.root.color = BLACK
        _debug_print(f"insert {interval}: {len(self)} intervals, height {self.height()}")
        if self._verify:
            self.verify_integrity()
        self.last_status = Status.OK
        return self.last_status

    def _insert(self, h: Optional[Node], interval: Interval) -> Node:
        if h is None:
            return Node(interval)

        if interval.start < h.start:
            h.left = self._insert(h.left, interval)
        elif interval.start > h.start:
            h.right = self._insert(h.right, interval)
        elif interval.end > h.interval.end:
            # Same start: grow the stored interval, never add a second one
            h.interval = Interval(h.start, interval.end)

        return fix_up(h)

    # --- Deletion ---

    def delete(self, start: int, end: int) -> Status:
        """
        Remove the stored interval [start, end].

        Deleting an interval that is not stored (no node with this start, or
        a node with this start but a different end) is a no-op.
        """
        try:
            interval = Interval(start, end)
        except InvalidIntervalError as e:
            _error_print(f"Error deleting interval: {e}")
            self.last_status = Status.INVALID_INTERVAL
            return self.last_status

        self.last_status = Status.OK
        if interval not in self:
            _debug_print(f"delete {interval}: not stored")
            return self.last_status

        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.color = RED
        self.root = self._delete(self.root, interval.start)
        if self.root is not None:
            self.root.color = BLACK
        _debug_print(f"delete {interval}: {len(self)} intervals left")
        if self._verify:
            self.verify_integrity()
        return self.last_status

    def _delete(self, h: Node, start: int) -> Optional[Node]:
        # The key is known to be stored below h
        if start < h.start:
            if not is_red(h.left) and not is_red(h.left.left):
                h = move_red_left(h)
            h.left = self._delete(h.left, start)
        else:
            if is_red(h.left):
                h = rotate_right(h)
            if start == h.start and h.right is None:
                return None
            if not is_red(h.right) and not is_red(h.right.left):
                h = move_red_right(h)
            if start == h.start:
                h.interval = min_node(h.right).interval
                h.right = delete_min(h.right)
            else:
                h.right = self._delete(h.right, start)
        return balance(h)

    # --- Search Methods ---

    def find_overlapping(self, start: int, end: int) -> list[Interval]:
        """Return the stored intervals that share at least one point with [start, end]."""
        try:
            query = Interval(start, end)
        except InvalidIntervalError as e:
            _error_print(f"Error finding overlapping intervals: {e}")
            self.last_status = Status.INVALID_INTERVAL
            return []

        result: list[Interval] = []

        def _search(node):
            if not node: return
            if query.overlaps(node.interval): result.append(node.interval)
            if node.left and node.left.max >= query.start: _search(node.left)
            if node.start <= query.end: _search(node.right)

        _search(self.root)
        self.last_status = Status.OK
        return result

    def find_containing(self, point: int) -> list[Interval]:
        """Return the stored intervals that contain ``point``."""
        result: list[Interval] = []

        def _search(node):
            if not node: return
            if node.interval.contains(point): result.append(node.interval)
            if node.left and node.left.max >= point: _search(node.left)
            if node.start <= point: _search(node.right)

        _search(self.root)
        return result

    def count_overlaps(self, start: int, end: int) -> int:
        """Return how many stored intervals overlap [start, end]."""
        try:
            query = Interval(start, end)
        except InvalidIntervalError as e:
            _error_print(f"Error counting overlapping intervals: {e}")
            self.last_status = Status.INVALID_INTERVAL
            return 0
        self.last_status = Status.OK
        return self._count_overlaps(query)

    def _count_overlaps(self, query: Interval) -> int:
        def _count(node):
            if not node: return 0
            count = 1 if query.overlaps(node.interval) else 0
            if node.left and node.left.max >= query.start: count += _count(node.left)
            if node.start <= query.end: count += _count(node.right)
            return count
        return _count(self.root)

    def find_max_overlapping(self) -> Optional[Interval]:
        """
        Return the stored interval overlapping the most stored intervals.

        Each interval counts as overlapping itself. Ties go to the interval
        met first in a root-left-right walk. Runs one pruned overlap count
        per node, so the worst case is quadratic.
        """
        if self.root is None:
            return None

        best: Optional[Node] = None
        best_count = 0

        def _visit(node):
            nonlocal best, best_count
            if not node: return
            overlaps = self._count_overlaps(node.interval)
            if overlaps > best_count:
                best, best_count = node, overlaps
            _visit(node.left)
            _visit(node.right)

        _visit(self.root)
        _debug_print(f"max overlapping {best.interval}: {best_count} overlaps")
        return best.interval

    # --- Debug Tools ---

    def print_tree(self, file: Optional[TextIO] = None, indent: int = 4):
        """Dump the tree sideways: right subtree on top, one node per line."""
        out = file if file is not None else sys.stdout

        def _print(node, level):
            if not node: return
            _print(node.right, level + 1)
            color = "RED" if node.color == RED else "BLACK"
            print(f"{' ' * (indent * level)}{node.interval} (max: {node.max}, color: {color})", file=out)
            _print(node.left, level + 1)

        _print(self.root, 0)

    def verify_integrity(self):
        """Crashes if ordering, red-black shape, max or count are violated."""
        if is_red(self.root):
            raise RuntimeError(f"Red root at {self.root.start}")

        def _walk(node, low, high):
            # Returns black height of the subtree
            if not node: return 0

            if (low is not None and node.start <= low) or (high is not None and node.start >= high):
                raise RuntimeError(f"Order Violation at {node.start}")
            if is_red(node.right):
                raise RuntimeError(f"Red Right Link at {node.start}")
            if is_red(node) and is_red(node.left):
                raise RuntimeError(f"Double Red at {node.start}")

            left_black = _walk(node.left, low, node.start)
            right_black = _walk(node.right, node.start, high)
            if left_black != right_black:
                raise RuntimeError(f"Black Height Violation at {node.start}")

            if node.max != max(node.interval.end, max_end(node.left), max_end(node.right)):
                raise RuntimeError(f"Max Violation at {node.start}")
            if node.count != 1 + size(node.left) + size(node.right):
                raise RuntimeError(f"Count Violation at {node.start}")

            return left_black + (0 if is_red(node) else 1)

        _walk(self.root, None, None)

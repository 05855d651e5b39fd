"""
Tree nodes of the left-leaning red-black interval tree and the primitives
that restructure them.

Every primitive takes a subtree root and returns the (possibly new) root of
that subtree; there are no parent pointers. The derived fields ``max`` and
``count`` are kept exact by each primitive.
"""

import sys
from typing import Optional

from .interval import Interval

RED = True
BLACK = False

# Max of an absent subtree
NO_MAX = -sys.maxsize - 1


class Node:
    __slots__ = ['interval', 'left', 'right', 'color', 'max', 'count']

    def __init__(self, interval: Interval):
        self.interval: Interval = interval
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None
        self.color: bool = RED
        self.max: int = interval.end
        self.count: int = 1

    @property
    def start(self) -> int:
        return self.interval.start

    def __repr__(self) -> str:
        color = "RED" if self.color == RED else "BLACK"
        return f"Node({self.interval}, max={self.max}, count={self.count}, {color})"


# --- Internal Utilities ---

def is_red(node: Optional[Node]) -> bool:
    if node is None: return False
    return node.color == RED


def max_end(node: Optional[Node]) -> int:
    return node.max if node else NO_MAX


def size(node: Optional[Node]) -> int:
    return node.count if node else 0


def update(node: Node):
    """Recompute max and count of node from its own interval and children."""
    node.max = max(node.interval.end, max_end(node.left), max_end(node.right))
    node.count = 1 + size(node.left) + size(node.right)


def flip_colors(h: Node):
    h.color = not h.color
    h.left.color = not h.left.color
    h.right.color = not h.right.color


def rotate_left(h: Node) -> Node:
    x = h.right
    h.right = x.left
    x.left = h
    x.color = h.color
    h.color = RED
    # x now spans what h spanned
    x.max = h.max
    x.count = h.count
    update(h)
    return x


def rotate_right(h: Node) -> Node:
    x = h.left
    h.left = x.right
    x.right = h
    x.color = h.color
    h.color = RED
    x.max = h.max
    x.count = h.count
    update(h)
    return x


def fix_up(h: Node) -> Node:
    """Restore the left-leaning shape of h on the way up from an insert."""
    if is_red(h.right) and not is_red(h.left): h = rotate_left(h)
    if is_red(h.left) and is_red(h.left.left): h = rotate_right(h)
    if is_red(h.left) and is_red(h.right): flip_colors(h)
    update(h)
    return h


def balance(h: Node) -> Node:
    """Restore the left-leaning shape of h on the way up from a delete."""
    if is_red(h.right): h = rotate_left(h)
    if is_red(h.left) and is_red(h.left.left): h = rotate_right(h)
    if is_red(h.left) and is_red(h.right): flip_colors(h)
    update(h)
    return h


def move_red_left(h: Node) -> Node:
    """
    Make h.left or one of its children red, assuming h is red and both
    h.left and h.left.left are black.
    """
    flip_colors(h)
    if is_red(h.right.left):
        h.right = rotate_right(h.right)
        h = rotate_left(h)
        flip_colors(h)
    return h


def move_red_right(h: Node) -> Node:
    """
    Make h.right or one of its children red, assuming h is red and both
    h.right and h.right.left are black.
    """
    flip_colors(h)
    if is_red(h.left.left):
        h = rotate_right(h)
        flip_colors(h)
    return h


def min_node(h: Node) -> Node:
    while h.left is not None:
        h = h.left
    return h


def delete_min(h: Node) -> Optional[Node]:
    if h.left is None:
        return None
    if not is_red(h.left) and not is_red(h.left.left):
        h = move_red_left(h)
    h.left = delete_min(h.left)
    return balance(h)

import os
import random

import pytest

from itree.interval_tree import RedBlackIntervalTree

# Qt widgets in tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def tree():
    return RedBlackIntervalTree(verify=True)


@pytest.fixture
def sample_tree(tree):
    for start, end in [(1, 5), (3, 7), (10, 15)]:
        tree.insert(start, end)
    return tree


def random_intervals(rng: random.Random, count: int, span: int = 200, max_length: int = 30):
    """Intervals with distinct starts drawn from [0, span)."""
    starts = rng.sample(range(span), count)
    return [(s, s + rng.randint(0, max_length)) for s in starts]

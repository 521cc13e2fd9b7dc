import pytest

from fibheap import FibonacciHeap, OperationCounter


def child_of_rank(node, rank):
    return next(child for child in node.children() if child.rank == rank)


def below_min(heap, node):
    return node.key - heap.find_min().key + 1


@pytest.fixture
def binomial():
    """A heap holding a single binomial tree of rank 5."""
    heap = FibonacciHeap(counter=OperationCounter())
    for key in range(33):
        heap.insert(key)
    heap.delete_min()
    assert heap.counters_rep() == [0, 0, 0, 0, 0, 1]
    return heap


def test_binomial_shape(binomial):
    root = binomial.find_min()
    assert sorted(child.rank for child in root.children()) == [0, 1, 2, 3, 4]


def test_single_cut_marks_parent(binomial):
    heap = binomial
    x1 = child_of_rank(heap.find_min(), 4)
    leaf = child_of_rank(x1, 0)
    heap.decrease_key(leaf, below_min(heap, leaf))
    assert leaf.is_root()
    assert not leaf.marked
    assert x1.marked
    assert x1.rank == 3
    assert heap.mark_count == 1
    assert heap.tree_count == 2
    assert heap.counter.cuts == 1
    assert heap.potential() == 2 + 2 * 1
    heap.check()


def test_root_child_cut_leaves_root_unmarked(binomial):
    heap = binomial
    root = heap.find_min()
    leaf = child_of_rank(root, 0)
    heap.decrease_key(leaf, below_min(heap, leaf))
    assert not root.marked
    assert heap.mark_count == 0
    heap.check()


def test_cascading_cut(binomial):
    heap = binomial
    root = heap.find_min()
    x1 = child_of_rank(root, 4)
    x2 = child_of_rank(x1, 3)
    x3 = child_of_rank(x2, 2)
    y = child_of_rank(x3, 1)
    z = child_of_rank(x3, 0)

    w = child_of_rank(x2, 0)
    heap.decrease_key(w, below_min(heap, w))
    heap.decrease_key(z, below_min(heap, z))
    assert x2.marked and x3.marked
    assert not x1.marked
    assert heap.mark_count == 2
    trees, cuts = heap.tree_count, heap.counter.cuts

    heap.decrease_key(y, below_min(heap, y))

    # y, x3 and x2 become roots, x1 is marked instead
    assert heap.tree_count == trees + 3
    assert heap.counter.cuts == cuts + 3
    assert heap.mark_count == 2 - 2 + 1
    assert y.is_root() and x3.is_root() and x2.is_root()
    assert not x3.marked and not x2.marked
    assert x1.marked
    assert x1.rank == 3
    assert heap.find_min() is y
    heap.check()


def test_cascade_stops_at_root(binomial):
    heap = binomial
    root = heap.find_min()
    x1 = child_of_rank(root, 4)
    x2 = child_of_rank(x1, 3)

    for leaf in [child_of_rank(x1, 0), child_of_rank(x2, 0)]:
        heap.decrease_key(leaf, below_min(heap, leaf))
    assert x1.marked and x2.marked
    cuts = heap.counter.cuts

    y = child_of_rank(x2, 1)
    heap.decrease_key(y, below_min(heap, y))
    assert heap.counter.cuts == cuts + 3
    assert x1.is_root() and x2.is_root()
    assert not root.marked
    assert heap.mark_count == 0
    heap.check()


def test_delete_min_unmarks_children(binomial):
    heap = binomial
    x1 = child_of_rank(heap.find_min(), 4)
    leaf = child_of_rank(x1, 0)
    heap.decrease_key(leaf, below_min(heap, leaf))
    assert heap.mark_count == 1
    heap.delete_min()
    heap.delete_min()
    assert heap.mark_count == 0
    assert heap.potential() == heap.tree_count + 2 * heap.mark_count
    heap.check()

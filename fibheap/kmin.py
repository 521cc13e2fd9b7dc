from .errors import InvalidArgument, InvalidState
from .heap import FibonacciHeap


def k_smallest(heap, k):
    """
    The k smallest keys of a heap that holds a single tree.

    The source heap is left untouched. An auxiliary heap holds the
    frontier of the tree: every extracted node contributes its children,
    so the auxiliary heap never holds more than k times the root degree
    entries.

    Args:
        heap: a FibonacciHeap whose root list holds exactly one tree
        k: number of keys, 0 <= k <= len(heap)

    Returns:
        list of the k smallest keys in non-decreasing order

    Examples:
        >>> h = FibonacciHeap()
        >>> for key in [0, 5, 3, 8, 1]:
        ...     _ = h.insert(key)
        >>> h.delete_min()
        >>> k_smallest(h, 3)
        [1, 3, 5]
    """
    if k < 0 or k > len(heap):
        raise InvalidArgument(
            f'k must be between 0 and {len(heap)}, got {k}')
    if k == 0:
        return []
    if heap.tree_count != 1:
        raise InvalidState(
            f'k_smallest needs a single tree, the heap has {heap.tree_count}')

    ret = []
    frontier = FibonacciHeap(counter=heap.counter)
    frontier.insert(heap.min_node.key, heap.min_node)
    for _ in range(k):
        origin = frontier.find_min().value
        ret.append(origin.key)
        frontier.delete_min()
        for child in origin.children():
            frontier.insert(child.key, child)
    return ret

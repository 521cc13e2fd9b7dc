import logging
import math

import numpy as np

from .config import query
from .counters import GLOBAL_COUNTER
from .errors import InvalidArgument, InvalidState, StaleHandle
from .node import HeapNode, Owner, connect, link_before

log = logging.getLogger(__name__)

PHI = (1 + math.sqrt(5)) / 2
_LOG_PHI = math.log(PHI)


def max_rank(n):
    """
    Upper bound on the rank of any node in a heap holding ``n`` nodes.
    """
    if n < 1:
        return 0
    return int(math.log(n) / _LOG_PHI)


class FibonacciHeap():
    """
    Fibonacci Heap over integer keys

    Attributes:
        first: the first root of the root list
        min_node: the root with the minimum key
        key_number: number of keys in the heap
        tree_count: number of trees in the root list
        mark_count: number of marked nodes
        counter: link/cut counter, shared by all heaps unless given

    Methods:
        insert(key): insert a key and return its node
        find_min(): the node with the minimum key
        delete_min(): remove the node with the minimum key
        decrease_key(node, delta): subtract delta from the key of node
        delete(node): remove node from the heap
        meld(other): move every node of other into this heap
    """

    def __init__(self, counter=None):
        self.first, self.min_node = None, None
        self.key_number, self.tree_count, self.mark_count = 0, 0, 0
        self.counter = GLOBAL_COUNTER if counter is None else counter
        self.check_handles = query('check.handles')
        self.slack = query('consolidate.slack')
        self._owner = Owner()

    def __len__(self):
        return self.key_number

    def __repr__(self):
        return (f'FibonacciHeap(size={self.key_number}, '
                f'trees={self.tree_count}, marked={self.mark_count})')

    def is_empty(self):
        return self.first is None

    def size(self):
        return self.key_number

    def insert(self, key, value=None):
        node = HeapNode(key, value)
        node.owner = self._owner
        if self.first is not None:
            link_before(node, self.first)
        self.first = node
        if self.min_node is None or key < self.min_node.key:
            self.min_node = node
        self.key_number += 1
        self.tree_count += 1
        return node

    def find_min(self):
        return self.min_node

    def roots(self):
        if self.first is not None:
            yield from self.first.siblings()

    def nodes(self):
        stack = list(self.roots())
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children())

    def delete_min(self):
        node = self.min_node
        if node is None:
            raise InvalidState('delete_min on an empty heap')
        if node.child is not None:
            first_child = node.child
            last_child = first_child.prev
            for child in first_child.siblings():
                if child.marked:
                    child.marked = False
                    self.mark_count -= 1
                child.parent = None
            if node.next is node:
                self.first = first_child
                self.min_node = first_child
            else:
                connect(node.prev, first_child)
                connect(last_child, node.next)
                if self.first is node:
                    self.first = first_child
            self.tree_count += node.rank - 1
        else:
            if node.next is node:
                self.first, self.min_node = None, None
            else:
                connect(node.prev, node.next)
                if self.first is node:
                    self.first = node.next
            self.tree_count -= 1
        self.key_number -= 1
        self._release(node)
        if self.first is not None:
            self.consolidate()

    def extract_min(self):
        if self.min_node is None:
            raise InvalidState('extract_min on an empty heap')
        key = self.min_node.key
        self.delete_min()
        return key

    def consolidate(self):
        if self.first is None:
            return
        trees = [None] * (max_rank(self.key_number) + self.slack)
        roots = list(self.first.siblings())
        links = 0

        for x in roots:
            rank = x.rank
            while trees[rank] is not None:
                y = trees[rank]
                if y.key <= x.key:
                    x, y = y, x
                self._link(y, x)
                links += 1
                trees[rank] = None
                rank += 1
            trees[rank] = x

        self.first, self.min_node, self.tree_count = None, None, 0
        for x in trees:
            if x is None:
                continue
            if self.first is None:
                self.first = x
                x.next, x.prev = x, x
                self.min_node = x
            else:
                link_before(x, self.first)
                if x.key < self.min_node.key:
                    self.min_node = x
            self.tree_count += 1
        log.debug("consolidate: %d roots -> %d trees, %d links", len(roots),
                  self.tree_count, links)

    def _link(self, node, parent):
        if parent.child is None:
            node.next, node.prev = node, node
        else:
            link_before(node, parent.child)
        parent.child = node
        node.parent = parent
        parent.rank += 1
        self.counter.record_link()

    def _cut(self, node):
        parent = node.parent
        if node.next is node:
            parent.child = None
        else:
            if parent.child is node:
                parent.child = node.next
            connect(node.prev, node.next)
        parent.rank -= 1
        node.parent = None
        if node.marked:
            node.marked = False
            self.mark_count -= 1
        link_before(node, self.first)
        self.first = node
        self.tree_count += 1
        self.counter.record_cut()

    def _release(self, node):
        node.owner = None
        node.parent, node.child, node.rank = None, None, 0
        node.next, node.prev = node, node

    def _check(self, node):
        if not self.check_handles:
            return
        if node.owner is None:
            raise StaleHandle(f'node {node!r} was already removed')
        node.owner = node.owner.resolve()
        if node.owner is not self._owner:
            raise StaleHandle(f'node {node!r} belongs to another heap')

    def decrease_key(self, node, delta):
        self._check(node)
        if delta < 0:
            raise InvalidArgument(f'delta must be non-negative, got {delta}')
        node.key -= delta
        if node.key < self.min_node.key:
            self.min_node = node
        if node.parent is None or node.key >= node.parent.key:
            return

        x, depth = node, 0
        while True:
            parent = x.parent
            self._cut(x)
            depth += 1
            x = parent
            if x.parent is None or not x.marked:
                break
        if x.parent is not None:
            x.marked = True
            self.mark_count += 1
        if depth > 1:
            log.debug("cascading cut of depth %d at key %r", depth, node.key)

    def delete(self, node):
        self._check(node)
        self.decrease_key(node, node.key - self.min_node.key + 1)
        self.delete_min()

    def meld(self, other):
        if other is self:
            raise InvalidArgument('cannot meld a heap with itself')
        if other.first is None:
            return
        other._owner.link = self._owner
        if self.first is None:
            self.first, self.min_node = other.first, other.min_node
        else:
            self_last, other_last = self.first.prev, other.first.prev
            connect(self_last, other.first)
            connect(other_last, self.first)
            if other.min_node.key < self.min_node.key:
                self.min_node = other.min_node
        self.key_number += other.key_number
        self.tree_count += other.tree_count
        self.mark_count += other.mark_count

        other.first, other.min_node = None, None
        other.key_number, other.tree_count, other.mark_count = 0, 0, 0
        other._owner = Owner()

    def counters_rep(self):
        """
        Number of trees of each rank in the root list.

        Returns:
            list, the i-th entry is the number of trees of rank i.
            An empty heap returns an empty list.
        """
        if self.first is None:
            return []
        ranks = np.fromiter((node.rank for node in self.roots()), dtype=int)
        return np.bincount(ranks).tolist()

    def potential(self):
        return self.tree_count + 2 * self.mark_count

    @staticmethod
    def total_links():
        return GLOBAL_COUNTER.links

    @staticmethod
    def total_cuts():
        return GLOBAL_COUNTER.cuts

    def check(self):
        """
        Traverse the whole forest and verify every structural invariant.

        Raises:
            InvalidState: naming the first violated invariant.
        """
        if self.first is None:
            if self.min_node is not None or self.key_number:
                raise InvalidState('empty root list with live min or size')
            if self.tree_count or self.mark_count:
                raise InvalidState('empty heap with non-zero counters')
            return

        def _check_list(head, parent):
            count = 0
            for node in head.siblings():
                if node.next.prev is not node or node.prev.next is not node:
                    raise InvalidState(f'broken sibling links at {node!r}')
                if node.parent is not parent:
                    raise InvalidState(f'wrong parent pointer at {node!r}')
                count += 1
            return count

        if self.min_node is None or self.min_node.parent is not None:
            raise InvalidState('minimum is not a root')
        trees = _check_list(self.first, None)
        size, marks = 0, 0
        for node in self.nodes():
            size += 1
            if node.marked:
                if node.parent is None:
                    raise InvalidState(f'marked root {node!r}')
                marks += 1
            if node.parent is not None and node.key < node.parent.key:
                raise InvalidState(f'heap order violated at {node!r}')
            if node.key < self.min_node.key:
                raise InvalidState(f'{node!r} is smaller than the minimum')
            children = 0 if node.child is None else _check_list(
                node.child, node)
            if children != node.rank:
                raise InvalidState(f'rank of {node!r} is {node.rank}, '
                                   f'but it has {children} children')

        if trees != self.tree_count:
            raise InvalidState(
                f'tree count {self.tree_count}, root list holds {trees}')
        if marks != self.mark_count:
            raise InvalidState(
                f'mark count {self.mark_count}, forest holds {marks}')
        if size != self.key_number:
            raise InvalidState(f'size {self.key_number}, forest holds {size}')


def heap_union(a, b):
    """
    Union two Fibonacci Heaps
    """
    if a is None or a.is_empty():
        return b if b is not None else a
    if b is None or b.is_empty():
        return a
    a.meld(b)
    return a

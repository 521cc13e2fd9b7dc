"""
Amortized-cost audit of random workloads.

The actual cost of an operation is counted as one unit plus one unit per
link and per cut it performs. Adding the change of the potential
``#trees + 2 * #marked`` gives the amortized cost, which is bounded by

    insert        2
    decrease_key  5
    delete_min    log_phi(n) + 1, n the size before the operation
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import curve_fit

from .counters import OperationCounter
from .heap import FibonacciHeap

log = logging.getLogger(__name__)

OPS = ('insert', 'decrease_key', 'delete', 'delete_min')


@dataclass
class Trace():
    ops: np.ndarray
    sizes: np.ndarray
    actual: np.ndarray
    potential: np.ndarray

    def amortized(self) -> np.ndarray:
        return self.actual + np.diff(self.potential)

    def select(self, op: str) -> np.ndarray:
        return self.ops == op


class _Handles():
    """
    Live handles with O(1) random choice and removal.
    """

    def __init__(self):
        self.items = []
        self.index = {}

    def __len__(self):
        return len(self.items)

    def add(self, node):
        self.index[node] = len(self.items)
        self.items.append(node)

    def remove(self, node):
        i = self.index.pop(node)
        last = self.items.pop()
        if last is not node:
            self.items[i] = last
            self.index[last] = i

    def choice(self, rng):
        return self.items[rng.integers(len(self.items))]


def run_workload(n: int,
                 seed=None,
                 decrease_ratio: float = 0.3,
                 delete_ratio: float = 0.1) -> Trace:
    """
    Insert n random keys, then mix decrease_key, delete and delete_min
    until the heap is empty.

    Args:
        n: number of keys
        seed: seed of the numpy random generator
        decrease_ratio: probability that a step is a decrease_key
        delete_ratio: probability that a step is a delete of a random node

    Returns:
        Trace of the run
    """
    if min(decrease_ratio, delete_ratio) < 0 or (decrease_ratio +
                                                 delete_ratio) > 1:
        raise ValueError('ratios must be non-negative and sum to at most 1')

    rng = np.random.default_rng(seed)
    counter = OperationCounter()
    heap = FibonacciHeap(counter=counter)
    handles = _Handles()

    ops, sizes, actual, potential = [], [], [], [heap.potential()]

    def run(op, func, *args):
        sizes.append(len(heap))
        links, cuts = counter.snapshot()
        ret = func(*args)
        actual.append(1 + counter.links - links + counter.cuts - cuts)
        potential.append(heap.potential())
        ops.append(op)
        return ret

    for key in rng.integers(0, 10 * n, size=n):
        handles.add(run('insert', heap.insert, int(key)))

    while len(heap):
        r = rng.random()
        if r < decrease_ratio:
            node = handles.choice(rng)
            run('decrease_key', heap.decrease_key, node,
                int(rng.integers(1, n + 1)))
        elif r < decrease_ratio + delete_ratio:
            node = handles.choice(rng)
            handles.remove(node)
            run('delete', heap.delete, node)
        else:
            handles.remove(heap.find_min())
            run('delete_min', heap.delete_min)

    log.debug("workload of %d keys: %d operations, %d links, %d cuts", n,
              len(ops), counter.links, counter.cuts)
    return Trace(ops=np.array(ops),
                 sizes=np.array(sizes, dtype=int),
                 actual=np.array(actual, dtype=int),
                 potential=np.array(potential, dtype=int))


def summarize(trace: Trace) -> dict[str, dict]:
    amortized = trace.amortized()
    ret = {}
    for op in OPS:
        mask = trace.select(op)
        if not np.any(mask):
            continue
        ret[op] = {
            'count': int(np.count_nonzero(mask)),
            'actual': float(trace.actual[mask].mean()),
            'amortized': float(amortized[mask].mean()),
            'max_amortized': int(amortized[mask].max()),
        }
    return ret


def _log_growth(n, a, b):
    return a * np.log(n) + b


def fit_log_growth(sizes, costs) -> tuple[float, float]:
    """
    Fit costs = a * ln(sizes) + b.

    Returns:
        (a, b)
    """
    sizes = np.asarray(sizes, dtype=float)
    costs = np.asarray(costs, dtype=float)
    popt, _ = curve_fit(_log_growth, sizes, costs, p0=(1.0, 0.0))
    return float(popt[0]), float(popt[1])

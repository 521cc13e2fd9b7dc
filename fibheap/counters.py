"""
Link and cut counters.

``GLOBAL_COUNTER`` is shared by every heap created without an explicit
counter, so its totals accumulate across all heap instances of the
process. Pass a private ``OperationCounter`` to a heap to measure it in
isolation.
"""


class OperationCounter():
    __slots__ = ('links', 'cuts')

    def __init__(self):
        self.links, self.cuts = 0, 0

    def record_link(self):
        self.links += 1

    def record_cut(self):
        self.cuts += 1

    def snapshot(self):
        return self.links, self.cuts

    def __repr__(self):
        return f'OperationCounter(links={self.links}, cuts={self.cuts})'


GLOBAL_COUNTER = OperationCounter()


def total_links():
    return GLOBAL_COUNTER.links


def total_cuts():
    return GLOBAL_COUNTER.cuts

class FibHeapError(Exception):
    pass


class InvalidState(FibHeapError):
    """The heap is not in a state that allows the operation."""


class InvalidArgument(FibHeapError, ValueError):
    """An argument is outside the range the operation accepts."""


class StaleHandle(FibHeapError):
    """The node was removed from the heap, or never belonged to it."""

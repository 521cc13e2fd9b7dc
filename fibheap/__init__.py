from .counters import GLOBAL_COUNTER, OperationCounter, total_cuts, total_links
from .errors import FibHeapError, InvalidArgument, InvalidState, StaleHandle
from .heap import PHI, FibonacciHeap, heap_union, max_rank
from .kmin import k_smallest
from .node import HeapNode
from .version import __version__

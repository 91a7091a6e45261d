"""
GFAWeaver v0.1.0

Shared utilities: strand operations and parallel enumeration helpers.
"""

from .sequence_utils import complement, reverse_complement, iter_strand
from .parallel import parallel_map, resolve_threads

__all__ = [
    "complement",
    "reverse_complement",
    "iter_strand",
    "parallel_map",
    "resolve_threads",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Thread-pool helpers for read-only, data-parallel graph enumeration.

No parallel query may run while the same graph is being mutated; the
helpers take a snapshot list of the items before dispatching work.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def resolve_threads(threads: Optional[int] = None) -> int:
    """Number of worker threads to use (auto-detect when None or < 1)."""
    if threads is None or threads < 1:
        return max(1, os.cpu_count() or 1)
    return threads


def parallel_map(
    func: Callable[[T], R],
    items: Iterable[T],
    threads: Optional[int] = None,
) -> List[R]:
    """
    Apply func to every item on a thread pool.
    
    Args:
        func: Function applied to each item
        items: Items to process (materialised before dispatch)
        threads: Number of worker threads (None = CPU count)
    
    Returns:
        Results in the same order as items
    """
    snapshot = list(items)
    num_workers = resolve_threads(threads)
    
    if num_workers == 1 or len(snapshot) < 2:
        return [func(item) for item in snapshot]
    
    logger.debug(f"Dispatching {len(snapshot)} items to {num_workers} threads")
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        return list(executor.map(func, snapshot))


__all__ = ["parallel_map", "resolve_threads"]

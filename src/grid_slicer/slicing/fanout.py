"""
Module: slicing.fanout

Purpose:
    Fixed-size fan-out/fan-in over the four output cells. Cells are
    independent, so they render on a thread pool; results are always
    returned in input order, whatever order the workers finish in.

Key Functions:
    - map_cells(): Ordered parallel map

Dependencies:
    - concurrent.futures: Thread pool execution

Used By:
    - slicing.partition: slice_cells()
    - slicing.reveal: extend()
    - pipeline: Encoding
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_cells(
    fn: Callable[[T], R],
    items: Sequence[T],
    max_workers: int = 4,
) -> List[R]:
    """
    Apply fn to every item, in parallel, keeping input order.

    If any worker raises, the exception propagates after the pool has
    shut down; no partial list is returned.

    Args:
        fn: Function run once per item
        items: Work items (the four cells)
        max_workers: Thread count; 1 runs inline with no pool

    Returns:
        [fn(item) for item in items], in order
    """
    if max_workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as pool:
        futures = [pool.submit(fn, item) for item in items]
        # Collect by position, not completion
        return [future.result() for future in futures]

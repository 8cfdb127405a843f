"""
Utility functions for generating key sequences for AVL tree experiments.
"""
import math
from typing import Iterator, List, Optional, Tuple

import numpy as np


def optimal_sequence(n: int) -> Iterator[int]:
    """
    Yield the keys 1..n in an order that keeps an unbalanced BST balanced.

    Keys are produced level by level as ceil(i * (n + 1) / 2**e) for odd i,
    i.e. n/2 first, then n/4 and 3n/4, then the eighths, and so on. Values
    that were already produced, or fall outside 1..n, are skipped.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    seen = set()
    exp = 1
    i = -1
    while len(seen) < n:
        i += 2
        if i > 2 ** exp:
            exp += 1
            i = 1
        key = math.ceil((i * (n + 1)) / (2 ** exp))
        if 1 <= key <= n and key not in seen:
            seen.add(key)
            yield key


def random_distinct_keys(
    size: int,
    seed: Optional[int] = None,
    key_range: Tuple[int, int] = (0, 2**31 - 2),
) -> List[int]:
    """
    Draw ``size`` distinct keys uniformly from ``key_range`` (inclusive).

    Raises:
        ValueError: If the range holds fewer than ``size`` keys.
    """
    min_key, max_key = key_range
    space = max_key - min_key + 1
    if space < size:
        raise ValueError(f"Key-space too small! Required: {size}, Available: {space}")
    rng = np.random.default_rng(seed)
    if space <= 4 * size:
        keys = rng.choice(space, size=size, replace=False) + min_key
        return [int(k) for k in keys]

    # sparse draw: oversample and drop duplicates, preserving draw order
    keys: List[int] = []
    seen = set()
    while len(keys) < size:
        for k in rng.integers(min_key, max_key + 1, size=2 * (size - len(keys))):
            k = int(k)
            if k not in seen:
                seen.add(k)
                keys.append(k)
                if len(keys) == size:
                    break
    return keys

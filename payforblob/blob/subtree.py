"""
payforblob • Blob Subtree sizing

A blob's shares are committed to in power-of-two aligned groups so that
each group lines up with a subtree of a row in the data square. The group
sizes form a "Merkle Mountain Range":

    merkle_mountain_range_sizes(11, 4) -> [4, 4, 2, 1]
    merkle_mountain_range_sizes(19, 8) -> [8, 8, 2, 1]

Width rule
----------
The default maximum group width for a blob of n shares is

    min(round_up_power_of_two(ceil(n / threshold)), min_square_size(n))

where `threshold` is the subtree root threshold (64). Block builders use the
same rule to place blobs, which is what makes the commitment provable
against the square's row roots.
"""

from __future__ import annotations

import math
from typing import List, Optional

from ..config import get_config
from ..errors import InvalidSize, InvalidWidth


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def round_up_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (int(n) - 1).bit_length()


def round_down_power_of_two(n: int) -> int:
    """Largest power of two <= n; n must be positive."""
    if n <= 0:
        raise ValueError("round_down_power_of_two requires a positive integer")
    return 1 << (int(n).bit_length() - 1)


def min_square_size(share_count: int) -> int:
    """Side length of the smallest power-of-two square holding `share_count` shares."""
    if share_count <= 0:
        return 1
    return round_up_power_of_two(math.isqrt(share_count - 1) + 1)


def subtree_width(share_count: int, subtree_root_threshold: Optional[int] = None) -> int:
    """
    Maximum subtree width for a blob of `share_count` shares.
    """
    threshold = subtree_root_threshold
    if threshold is None:
        threshold = get_config().square.subtree_root_threshold
    if threshold <= 0:
        raise InvalidWidth(f"subtree root threshold must be positive, got {threshold}")
    s = -(-share_count // threshold)
    return min(round_up_power_of_two(s), min_square_size(share_count))


def merkle_mountain_range_sizes(total_share_count: int, max_subtree_width: int) -> List[int]:
    """
    Split `total_share_count` into non-increasing powers of two, each no
    wider than `max_subtree_width`.

    Raises:
        InvalidSize   if total_share_count <= 0
        InvalidWidth  if max_subtree_width is not a positive power of two
    """
    if not isinstance(total_share_count, int) or total_share_count <= 0:
        raise InvalidSize(
            f"total share count must be positive, got {total_share_count!r}",
            data={"totalShareCount": total_share_count},
        )
    if not isinstance(max_subtree_width, int) or not is_power_of_two(max_subtree_width):
        raise InvalidWidth(
            f"max subtree width must be a positive power of two, got {max_subtree_width!r}",
            data={"maxSubtreeWidth": max_subtree_width},
        )

    sizes: List[int] = []
    remaining = total_share_count
    while remaining > 0:
        size = round_down_power_of_two(min(max_subtree_width, remaining))
        sizes.append(size)
        remaining -= size
    return sizes


__all__ = [
    "is_power_of_two",
    "round_up_power_of_two",
    "round_down_power_of_two",
    "min_square_size",
    "subtree_width",
    "merkle_mountain_range_sizes",
]

from __future__ import annotations
from collections import Counter
from typing import Iterable, Iterator, Mapping

from . import config as CFG

# N-grams are identified by a 32-bit polynomial hash, never by the substring
# itself. Two different n-grams may collide; that is accepted as an
# approximation and is not corrected anywhere downstream.
# Characters are code points (ord), not UTF-16 code units: anything outside
# the BMP counts as one character here, not a surrogate pair.


def ngram_size(length: float) -> int:
    """Map a length measure to an n-gram width: 2, 3 or 4."""
    if length <= CFG.SHORT_MAX:
        return 2
    if length <= CFG.MEDIUM_MAX:
        return 3
    return 4


def window_hash(window: str) -> int:
    """Direct Horner hash of a single window (base 131, mod 2**32)."""
    base, mask = CFG.HASH_BASE, CFG.HASH_MASK
    h = 0
    for ch in window:
        h = (h * base + ord(ch)) & mask
    return h


def rolling_hashes(s: str, n: int) -> Iterator[int]:
    """
    Yield the hash of every length-n window of s, left to right.

    The first window is hashed with Horner's method; each following window
    is derived in O(1) by dropping the outgoing character (weighted by
    base**(n-1)) and folding in the incoming one. The result is identical
    to window_hash(s[i:i+n]) for every i. Yields nothing if len(s) < n.
    """
    if n <= 0 or len(s) < n:
        return
    base, mask = CFG.HASH_BASE, CFG.HASH_MASK
    top = pow(base, n - 1, mask + 1)

    h = 0
    for ch in s[:n]:
        h = (h * base + ord(ch)) & mask
    yield h

    for i in range(n, len(s)):
        outgoing = ord(s[i - n])
        h = ((h - outgoing * top) * base + ord(s[i])) & mask
        yield h


def build_multiset(s: str, n: int) -> Counter[int]:
    """hash -> occurrence count for every window of s. Empty if len(s) < n."""
    return Counter(rolling_hashes(s, n))


def intersection_count(reference: Mapping[int, int], hashes: Iterable[int]) -> int:
    """
    Count occurrences in `hashes` that can be paired 1:1 with `reference`.

    A hash repeated in the stream only matches as many times as it occurs in
    the reference. `reference` is only read, so one multiset can be shared by
    any number of callers.
    """
    if not reference:
        return 0
    matched: dict[int, int] = {}
    total = 0
    for h in hashes:
        used = matched.get(h, 0)
        if used < reference.get(h, 0):
            matched[h] = used + 1
            total += 1
    return total

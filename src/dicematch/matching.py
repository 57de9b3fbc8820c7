from __future__ import annotations
import logging
import math
from numbers import Real
from typing import Iterable, List

from . import config as CFG
from .errors import InvalidArgumentError
from .models import DiceMatch
from .ngrams import build_multiset, intersection_count, ngram_size, rolling_hashes
from .normalize import normalize

log = logging.getLogger(__name__)


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def dice_coefficient(a: str, b: str) -> float:
    """
    Dice coefficient of two strings over character n-grams.

    Both inputs are lowercased and trimmed first. Equal strings score 1.0,
    an empty string against a non-empty one scores 0.0. The n-gram width is
    picked from the average of the two normalized lengths.
    """
    s1 = normalize(_require_str(a, "a"))
    s2 = normalize(_require_str(b, "b"))
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    n = ngram_size((len(s1) + len(s2)) / 2)
    len1 = len(s1) - n + 1
    len2 = len(s2) - n + 1
    if len1 <= 0 or len2 <= 0:
        return 0.0

    counts = build_multiset(s1, n)
    inter = intersection_count(counts, rolling_hashes(s2, n))
    return (2 * inter) / (len1 + len2)


def dice_coefficient_array(query: str, candidates: Iterable[str]) -> List[DiceMatch]:
    """
    Score `query` against every candidate, preserving input order.

    The query is normalized and hashed once. Unlike dice_coefficient(), the
    n-gram width comes from the query length alone and there is no equality
    short-circuit, so a batch score can differ from the pairwise score for
    the same two strings (e.g. a one-letter query scores 0 even against itself).
    """
    q = normalize(_require_str(query, "query"))
    items = [_require_str(c, "candidate") for c in candidates]

    n = ngram_size(len(q))
    len_q = len(q) - n + 1
    if len_q <= 0:
        log.debug("query %r shorter than n=%d; all %d candidates score 0", q, n, len(items))
        return [DiceMatch(item=item, score=0.0) for item in items]

    counts_q = build_multiset(q, n)
    out: List[DiceMatch] = []
    for item in items:
        s = normalize(item)
        len_item = len(s) - n + 1
        if len_item <= 0:
            out.append(DiceMatch(item=item, score=0.0))
            continue
        inter = intersection_count(counts_q, rolling_hashes(s, n))
        out.append(DiceMatch(item=item, score=(2 * inter) / (len_q + len_item)))

    log.debug("scored %d candidates (n=%d)", len(out), n)
    return out


def validate_top_n(top_n) -> int:
    if isinstance(top_n, bool) or not isinstance(top_n, int):
        raise InvalidArgumentError(f"top_n must be an int >= 0, got {top_n!r}")
    if top_n < 0:
        raise InvalidArgumentError(f"top_n must be >= 0, got {top_n}")
    return top_n


def validate_cutoff(cutoff) -> float:
    if isinstance(cutoff, bool) or not isinstance(cutoff, Real):
        raise InvalidArgumentError(f"cutoff must be a number in [0, 1], got {cutoff!r}")
    cutoff = float(cutoff)
    if math.isnan(cutoff) or not 0.0 <= cutoff <= 1.0:
        raise InvalidArgumentError(f"cutoff must be in [0, 1], got {cutoff}")
    return cutoff


def top_matches(query: str,
                candidates: Iterable[str],
                top_n: int = CFG.TOP_N,
                cutoff: float = CFG.CUTOFF) -> List[DiceMatch]:
    """
    Best-scoring candidates with score >= cutoff, highest first.

    top_n=0 means no limit. Arguments outside their domain raise
    InvalidArgumentError rather than being clamped.
    """
    top_n = validate_top_n(top_n)
    cutoff = validate_cutoff(cutoff)

    results = dice_coefficient_array(query, candidates)
    limit = top_n or len(results)
    kept = [r for r in results if r.score >= cutoff]
    kept.sort(key=lambda r: r.score, reverse=True)
    log.debug("top_matches: %d/%d passed cutoff=%.3f, limit=%d", len(kept), len(results), cutoff, limit)
    return kept[:limit]


# names used by the public API
similarity = dice_coefficient
similarity_batch = dice_coefficient_array
dice_coefficient_top_matches = top_matches

"""
Dice Match Module

String similarity with the Dice coefficient over character n-grams. The
n-gram width adapts to input length (2, 3 or 4), n-grams are hashed with a
32-bit rolling hash, and repeated n-grams are never matched more often than
they occur in both strings.

Main Functions:
    similarity(a, b): pairwise coefficient in [0, 1]
    similarity_batch(query, candidates): one DiceMatch per candidate, same order
    top_matches(query, candidates, top_n=0, cutoff=0.0): ranked, filtered matches

Example Usage:
    from dicematch import similarity, top_matches

    similarity("night", "nacht")          # 0.25

    for m in top_matches("appel", ["apple", "apply", "maple"], top_n=2):
        print(f"{m.score:.3f}: {m.item}")
"""

# src/dicematch/__init__.py
from .engine import Engine
from .errors import InvalidArgumentError
from .models import DiceMatch
from .matching import (
    dice_coefficient,
    dice_coefficient_array,
    dice_coefficient_top_matches,
    similarity,
    similarity_batch,
    top_matches,
)

__version__ = "1.0.0"
__all__ = [
    "DiceMatch",
    "Engine",
    "InvalidArgumentError",
    "dice_coefficient",
    "dice_coefficient_array",
    "dice_coefficient_top_matches",
    "similarity",
    "similarity_batch",
    "top_matches",
]

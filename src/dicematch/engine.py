# dicematch/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .loader import load_candidates
from .models import DiceMatch
from .matching import dice_coefficient, dice_coefficient_array, top_matches

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that holds a candidate list and runs the
    Dice matcher against it.

    Public API (used by CLI/Flask):
      * load(roots):     read candidates from files/folders (appends)
      * add(items):      append candidates directly
      * similarity(a,b): pairwise coefficient (no candidates needed)
      * score(query):    one DiceMatch per candidate, in load order
      * match(query, top_n, cutoff): ranked, filtered matches
      * shutdown():      drop loaded candidates

    Nothing is cached between calls: every query rebuilds its own n-gram
    multiset, so one Engine can serve concurrent readers.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._candidates: Optional[List[str]] = None

    # /* ~~~ Load candidate lines from source files or folders ~~~ */
    def load(self, roots: Iterable[str], *, verbose: bool = False) -> int:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True

        roots = list(roots)
        if not roots:
            raise ValueError("load(): at least one root is required")

        log.info("Loading candidates from %s", roots)
        return self.add(load_candidates(roots))

    def add(self, items: Iterable[str]) -> int:
        if self._candidates is None:
            self._candidates = []
        added = 0
        for item in items:
            if not isinstance(item, str):
                raise TypeError(f"candidate must be a str, got {type(item).__name__}")
            self._candidates.append(item)
            added += 1
        log.info("Engine now holds %d candidates (+%d)", len(self._candidates), added)
        return added

    def count(self) -> int:
        return len(self._candidates or [])

    # ------------- query -------------

    def similarity(self, a: str, b: str) -> float:
        return dice_coefficient(a, b)

    def score(self, query: str) -> List[DiceMatch]:
        return dice_coefficient_array(query, self._require_candidates())

    # /* ~~~ Rank candidates for a query; None falls back to config defaults ~~~ */
    def match(self, query: str, *, top_n: Optional[int] = None,
              cutoff: Optional[float] = None) -> List[DiceMatch]:
        return top_matches(
            query,
            self._require_candidates(),
            top_n=CFG.TOP_N if top_n is None else top_n,
            cutoff=CFG.CUTOFF if cutoff is None else cutoff,
        )

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._candidates = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_candidates(self) -> List[str]:
        if self._candidates is None:
            raise RuntimeError("Engine has no candidates. Call load() or add() first.")
        return self._candidates

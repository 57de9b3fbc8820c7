from __future__ import annotations
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class DiceMatch:
    item: str      # candidate exactly as supplied (not normalized)
    score: float   # Dice coefficient in [0, 1]

    def to_dict(self) -> dict:
        return asdict(self)

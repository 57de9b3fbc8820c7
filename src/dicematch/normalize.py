from __future__ import annotations


def normalize(text: str) -> str:
    """Lowercase and trim. Internal whitespace and punctuation are kept as-is."""
    return text.lower().strip()

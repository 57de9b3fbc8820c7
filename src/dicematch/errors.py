from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A caller passed a top_n / cutoff outside its documented domain."""

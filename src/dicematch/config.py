# dicematch/config.py
from __future__ import annotations
import os

# n-gram width thresholds (length measure -> n)
SHORT_MAX: int = 15    # L <= 15       -> bigrams
MEDIUM_MAX: int = 30   # 15 < L <= 30  -> trigrams, else 4-grams

# /* ~~~ polynomial rolling hash, wraps at 2**32 ~~~ */
HASH_BASE: int = 131
HASH_MASK: int = 0xFFFFFFFF

# top-k defaults: 0 means "return everything that passes the cutoff"
TOP_N: int = 0
CUTOFF: float = 0.0

# file types the candidate loader picks up when walking a folder
CANDIDATE_EXTS = [".txt"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# Progress logging (set DICEMATCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("DICEMATCH_VERBOSE") == "1"

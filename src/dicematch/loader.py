from __future__ import annotations
import logging
import os
from typing import Iterable, List

from . import config as CFG

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500


def _iter_candidate_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield file paths: roots that are files as-is, directories walked recursively."""
    exts = tuple(e.lower() for e in CFG.CANDIDATE_EXTS)
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            log.warning("skipping missing root %s", root)
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in CFG.EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(exts):
                    yield os.path.join(dirpath, fn)


def load_candidates(roots: Iterable[str]) -> List[str]:
    """
    Read candidate strings, one per non-blank line, from files or folders.
    Lines are kept verbatim (minus the line ending); matching normalizes later.
    """
    items: List[str] = []
    file_count = 0
    for path in _iter_candidate_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                for ln in f:
                    line = ln.rstrip("\r\n")
                    if line.strip():
                        items.append(line)
        except OSError as e:
            log.warning("skipping unreadable file %s: %s", path, e)
            continue

        file_count += 1
        if CFG.VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            print(f"[scanned] files={file_count:,}")

    log.info("loaded %d candidates from %d files", len(items), file_count)
    if CFG.VERBOSE:
        print(f"[done] files={file_count:,} candidates={len(items):,}")
    return items

"""View Cache - process-local cache of rendered collection views, keyed by resource path.

Invariants:
    - invalidate(path) drops the path and every path nested beneath it
    - get() never returns an entry stored before the latest invalidation of its path
    - A fill computed before an invalidation is discarded: callers capture
      generation(path) before reading and pass it to set()
    - Values are stored as-is; callers must not mutate what they put in

Design Decisions:
    - Module-level singleton like the other process state: single-process uvicorn,
      entries lost on restart and recomputed on next access
    - Path normalization strips trailing slashes so "/dashboard/invoices/" and
      "/dashboard/invoices" share one entry
    - Generations are counted on the invalidated path only; a path's effective
      generation sums its ancestors', so invalidating a parent moves every child
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    return path.rstrip("/") or "/"


def _ancestors(path: str) -> list[str]:
    """The path itself and every enclosing path up to "/"."""
    parts = [p for p in path.split("/") if p]
    return ["/"] + ["/" + "/".join(parts[:i]) for i in range(1, len(parts) + 1)]


class ViewCache:
    """Path-keyed cache implementing the ViewInvalidator protocol."""

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self._invalidations: dict[str, int] = {}

    def get(self, path: str) -> Any | None:
        return self._entries.get(_normalize(path))

    def generation(self, path: str) -> int:
        """Counter that moves whenever path or an enclosing path is invalidated."""
        return sum(
            self._invalidations.get(p, 0) for p in _ancestors(_normalize(path))
        )

    def set(self, path: str, value: Any, generation: int | None = None) -> bool:
        """Store value unless path was invalidated since generation was read.

        Returns False when the value was discarded as stale.
        """
        key = _normalize(path)
        if generation is not None and generation != self.generation(key):
            logger.debug("Discarded stale view fill", extra={"path": key})
            return False
        self._entries[key] = value
        return True

    def invalidate(self, path: str) -> None:
        """Mark the view at path (and its sub-paths) stale."""
        root = _normalize(path)
        self._invalidations[root] = self._invalidations.get(root, 0) + 1
        prefix = root if root.endswith("/") else root + "/"
        stale = [
            key for key in self._entries
            if key == root or key.startswith(prefix)
        ]
        for key in stale:
            del self._entries[key]
        logger.debug(
            f"Invalidated {len(stale)} cached view(s)", extra={"path": root},
        )

    def clear(self) -> None:
        self._entries.clear()
        self._invalidations.clear()

    def __contains__(self, path: str) -> bool:
        return _normalize(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


view_cache = ViewCache()

"""Boundary Protocols - contracts between the mutation pipeline and its collaborators.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Cache invalidation and navigation are injected, never reached as globals
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Both collaborators are synchronous: they only mark state, no IO
"""

from typing import Protocol


class ViewInvalidator(Protocol):
    """Marks a cached view stale so it is recomputed on next access."""
    def invalidate(self, path: str) -> None: ...


class Navigator(Protocol):
    """Asks the caller to navigate to another resource after the request."""
    def redirect_to(self, path: str) -> None: ...

"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId and CustomerId are opaque strings, never parsed by domain logic
    - AmountInCents is always an integer number of cents
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and bind as SQL parameters without adapters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

AmountInCents = NewType("AmountInCents", int)   # > 0 for stored invoices


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment states - maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class MutationKind(str, Enum):
    """The three single-row mutations the pipeline performs."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

"""Mutation Outcomes - the tagged result of one invoice mutation request.

Invariants:
    - Exactly one of Success | FieldError | FatalError per request
    - FieldError.errors is never empty
    - Outcomes are created fresh per request and never persisted
    - CallerAction.redirect_to is None unless a Create/Update succeeded

Design Decisions:
    - Frozen dataclasses + union alias over a class hierarchy: match by isinstance,
      no behavior on the variants themselves
"""

from dataclasses import dataclass, field

from app.core.domain_types import MutationKind
from app.core.errors import InvoiceMutationError

ValidationErrorSet = dict[str, list[str]]


@dataclass(frozen=True)
class Success:
    """Statement executed. rows_affected may be 0 for update/delete of a missing id."""
    kind: MutationKind
    rows_affected: int = 0


@dataclass(frozen=True)
class FieldError:
    """Input rejected before any statement ran."""
    errors: ValidationErrorSet
    message: str

    def __post_init__(self):
        if not self.errors:
            raise ValueError("FieldError requires at least one field error")


@dataclass(frozen=True)
class FatalError:
    """Statement failed. message is the generic per-operation text.

    error is the executor's InvoiceMutationError, with its ErrorContext and
    the DatabaseError it was raised from.
    """
    kind: MutationKind
    message: str
    error: InvoiceMutationError | None = None


MutationOutcome = Success | FieldError | FatalError


@dataclass(frozen=True)
class CallerAction:
    """What the caller must do next: redisplay errors, navigate, or nothing."""
    errors: ValidationErrorSet = field(default_factory=dict)
    message: str | None = None
    redirect_to: str | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

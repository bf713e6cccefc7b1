"""Outcome Reporter - turns a MutationOutcome into the caller's next action.

Invariants:
    - FieldError: no side effects, no navigation
    - Success: collection view invalidated first, then navigation for Create/Update only
    - FatalError: raised as InvoiceMutationError, never returned; the executor's
      error is re-raised as-is so its context and cause survive
"""

from app.core.collaborator_protocols import Navigator, ViewInvalidator
from app.core.domain_types import MutationKind
from app.core.errors import InvoiceMutationError
from app.core.mutation_outcome import (
    CallerAction, FatalError, FieldError, MutationOutcome,
)


class OutcomeReporter:

    def __init__(
        self,
        invalidator: ViewInvalidator,
        navigator: Navigator,
        collection_path: str,
    ):
        self._invalidator = invalidator
        self._navigator = navigator
        self._collection_path = collection_path

    def report(self, outcome: MutationOutcome) -> CallerAction:
        if isinstance(outcome, FieldError):
            return CallerAction(errors=outcome.errors, message=outcome.message)

        if isinstance(outcome, FatalError):
            # Already logged where the statement failed
            if outcome.error is not None:
                raise outcome.error
            raise InvoiceMutationError(outcome.kind)

        self._invalidator.invalidate(self._collection_path)
        # Delete is issued from the collection view itself
        if outcome.kind is MutationKind.DELETE:
            return CallerAction()
        self._navigator.redirect_to(self._collection_path)
        return CallerAction(redirect_to=self._collection_path)

"""Invoice Actions - the create/update/delete pipelines behind the invoice forms.

Invariants:
    - Per request: Idle -> Validating -> {Invalid | Executing} -> {Success | Failed}
    - Create returns field errors as a CallerAction; Update raises InvoiceValidationError
    - No statement runs unless validation succeeded
    - No retries: every failure is terminal for the request

Design Decisions:
    - Create/Update asymmetry kept: the edit form has no error display, so invalid
      edits surface through the global validation error handler instead
    - Collaborators (executor, reporter) injected per request by the route layer
"""

import logging
from collections.abc import Mapping

from app.core.domain_types import InvoiceId, MutationKind
from app.core.errors import ErrorContext, InvoiceMutationError, InvoiceValidationError
from app.core.mutation_outcome import (
    CallerAction, FatalError, FieldError, MutationOutcome, Success,
)
from app.schemas.invoice import ValidatedInvoice, validate_invoice
from app.services.invoice_executor import InvoiceMutationExecutor
from app.services.outcome_reporter import OutcomeReporter

logger = logging.getLogger(__name__)

CREATE_FIELD_ERROR_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_FIELD_ERROR_MESSAGE = "Missing Fields. Failed to Update Invoice."


async def create_invoice(
    draft: Mapping[str, str | None],
    executor: InvoiceMutationExecutor,
    reporter: OutcomeReporter,
) -> CallerAction:
    """Validate the create form and insert a new invoice dated today."""
    validated = validate_invoice(draft)
    if not isinstance(validated, ValidatedInvoice):
        logger.info(
            f"Create form rejected: {sorted(validated)}",
            extra={"operation": MutationKind.CREATE.value},
        )
        return reporter.report(
            FieldError(errors=validated, message=CREATE_FIELD_ERROR_MESSAGE),
        )

    try:
        rows = await executor.insert(validated)
        outcome: MutationOutcome = Success(MutationKind.CREATE, rows_affected=rows)
    except InvoiceMutationError as e:
        outcome = FatalError(MutationKind.CREATE, e.message, e)
    return reporter.report(outcome)


async def update_invoice(
    invoice_id: InvoiceId,
    draft: Mapping[str, str | None],
    executor: InvoiceMutationExecutor,
    reporter: OutcomeReporter,
) -> CallerAction:
    """Validate the edit form and overwrite customer, amount and status of one invoice."""
    logger.info(
        "Update invoice triggered",
        extra={"invoice_id": invoice_id, "operation": MutationKind.UPDATE.value},
    )
    validated = validate_invoice(draft)
    if not isinstance(validated, ValidatedInvoice):
        raise InvoiceValidationError(
            UPDATE_FIELD_ERROR_MESSAGE,
            validated,
            ErrorContext(invoice_id=invoice_id, operation=MutationKind.UPDATE.value),
        )

    try:
        rows = await executor.update(invoice_id, validated)
        outcome: MutationOutcome = Success(MutationKind.UPDATE, rows_affected=rows)
    except InvoiceMutationError as e:
        outcome = FatalError(MutationKind.UPDATE, e.message, e)
    return reporter.report(outcome)


async def delete_invoice(
    invoice_id: InvoiceId,
    executor: InvoiceMutationExecutor,
    reporter: OutcomeReporter,
) -> CallerAction:
    try:
        rows = await executor.delete(invoice_id)
        outcome: MutationOutcome = Success(MutationKind.DELETE, rows_affected=rows)
    except InvoiceMutationError as e:
        outcome = FatalError(MutationKind.DELETE, e.message, e)
    return reporter.report(outcome)

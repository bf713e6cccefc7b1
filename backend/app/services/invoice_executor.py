"""Invoice Mutation Executor - one parameterized statement per call, under a scoped connection.

Invariants:
    - Exactly one connection acquired per call, released on every exit path
    - Exactly one INSERT, UPDATE or DELETE per call, always parameterized
    - amount is written as integer cents (ValidatedInvoice.amount_in_cents)
    - Update never writes date; update/delete of an unknown id affect 0 rows and succeed
    - DatabaseError never escapes: logged, then re-raised as InvoiceMutationError
      with the fixed per-operation message

Design Decisions:
    - SQLAlchemy Core statements against the Invoice table over ORM unit-of-work:
      no read-before-write, last write wins
    - today injected as a callable so tests can pin the creation date
"""

import datetime
import logging
from typing import Callable

from sqlalchemy import delete, insert, update
from sqlalchemy.sql.expression import Executable

from app.core.domain_types import InvoiceId, MutationKind
from app.core.errors import DatabaseError, ErrorContext, InvoiceMutationError
from app.infrastructure.database import DatabaseSessionManager
from app.models.invoice import Invoice, new_invoice_id
from app.schemas.invoice import ValidatedInvoice

logger = logging.getLogger(__name__)


class InvoiceMutationExecutor:
    """Writes validated invoices to the invoices table."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self._db = db
        self._today = today

    async def insert(self, invoice: ValidatedInvoice) -> int:
        """Insert a new row dated today under a generated id."""
        invoice_id = InvoiceId(new_invoice_id())
        stmt = insert(Invoice).values(
            id=invoice_id,
            customer_id=invoice.customer_id,
            amount=invoice.amount_in_cents,
            status=invoice.status.value,
            date=self._today(),
        )
        return await self._execute(MutationKind.CREATE, stmt, invoice_id)

    async def update(self, invoice_id: InvoiceId, invoice: ValidatedInvoice) -> int:
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=invoice.customer_id,
                amount=invoice.amount_in_cents,
                status=invoice.status.value,
            )
        )
        return await self._execute(MutationKind.UPDATE, stmt, invoice_id)

    async def delete(self, invoice_id: InvoiceId) -> int:
        stmt = delete(Invoice).where(Invoice.id == invoice_id)
        return await self._execute(MutationKind.DELETE, stmt, invoice_id)

    async def _execute(
        self, kind: MutationKind, stmt: Executable, invoice_id: InvoiceId,
    ) -> int:
        """Run stmt under one scoped connection and commit. Returns rows affected."""
        log_extra = {"invoice_id": invoice_id, "operation": kind.value}
        try:
            async with self._db.connection() as conn:
                result = await conn.execute(stmt)
                rows_affected = result.rowcount
                await conn.commit()
        except DatabaseError as e:
            logger.error(
                f"Database Error while trying to {kind.value} invoice: {e.message}",
                extra={**log_extra, "error_code": e.code},
                exc_info=True,
            )
            raise InvoiceMutationError(
                kind, ErrorContext(invoice_id=invoice_id, operation=kind.value),
            ) from e

        if rows_affected == 0:
            logger.warning(
                f"Invoice {kind.value} matched no rows",
                extra={**log_extra, "rows_affected": rows_affected},
            )
        else:
            logger.info(
                f"Invoice {kind.value} succeeded",
                extra={**log_extra, "rows_affected": rows_affected},
            )
        return rows_affected

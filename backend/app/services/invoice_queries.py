"""Invoice Queries - read side for the invoice collection view and single invoices.

Invariants:
    - One scoped connection per query, released on every exit path
    - Collection ordered newest first (date desc, then id for a stable order)
    - get_invoice raises ResourceNotFoundError; mutations never do
"""

from sqlalchemy import select

from app.core.domain_types import InvoiceId
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import DatabaseSessionManager
from app.models.invoice import Invoice
from app.schemas.invoice import InvoiceResponse


async def list_invoices(db: DatabaseSessionManager) -> list[InvoiceResponse]:
    query = select(Invoice.__table__).order_by(Invoice.date.desc(), Invoice.id)
    async with db.connection() as conn:
        result = await conn.execute(query)
        rows = result.mappings().all()
    return [InvoiceResponse.model_validate(dict(row)) for row in rows]


async def get_invoice(
    db: DatabaseSessionManager, invoice_id: InvoiceId,
) -> InvoiceResponse:
    query = select(Invoice.__table__).where(Invoice.id == invoice_id)
    async with db.connection() as conn:
        result = await conn.execute(query)
        row = result.mappings().one_or_none()
    if row is None:
        raise ResourceNotFoundError("Invoice", invoice_id)
    return InvoiceResponse.model_validate(dict(row))

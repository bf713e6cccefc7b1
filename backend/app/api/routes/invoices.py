"""Invoice Routes - form handlers for the invoice dashboard plus the read endpoints.

Invariants:
    - Form bodies are read as a plain str -> str mapping, first value per field;
      file parts are dropped
    - Create: 303 to the collection view on success, 422 form state on field errors
    - Edit: 303 on success; invalid input raises InvoiceValidationError (global handler, 422)
    - Delete: 204, never a redirect
    - Fatal failures surface only the generic per-operation message (global handler, 500)
    - The collection view is served from view_cache until a mutation invalidates it;
      a read that overlaps a mutation is returned but never cached

Design Decisions:
    - Navigator and reporter built per request: no state shared across requests
      except the view cache
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.api.navigation import ResponseNavigator
from app.core.domain_types import InvoiceId
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.view_cache import view_cache
from app.schemas.invoice import InvoiceFormState, InvoiceResponse
from app.services.invoice_actions import (
    create_invoice, delete_invoice, update_invoice,
)
from app.services.invoice_executor import InvoiceMutationExecutor
from app.services.invoice_queries import get_invoice, list_invoices
from app.services.outcome_reporter import OutcomeReporter

INVOICES_VIEW_PATH = "/dashboard/invoices"

router = APIRouter(prefix=INVOICES_VIEW_PATH, tags=["invoices"])


def get_executor(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> InvoiceMutationExecutor:
    return InvoiceMutationExecutor(db)


def _build_reporter(navigator: ResponseNavigator) -> OutcomeReporter:
    return OutcomeReporter(view_cache, navigator, INVOICES_VIEW_PATH)


async def read_draft(request: Request) -> dict[str, str]:
    """Read the submitted form as raw string tokens, first value per field."""
    form = await request.form()
    draft: dict[str, str] = {}
    for key in form.keys():
        first = form.getlist(key)[0]
        if isinstance(first, str):
            draft[key] = first
    return draft


# ─── Collection view ────────────────────────────────────────────

@router.get("")
async def list_invoices_view(
    db: DatabaseSessionManager = Depends(get_db_manager),
):
    """Invoice collection, newest first. Cached until the next mutation."""
    cached = view_cache.get(INVOICES_VIEW_PATH)
    if cached is not None:
        return cached
    generation = view_cache.generation(INVOICES_VIEW_PATH)
    invoices = await list_invoices(db)
    payload = {
        "invoices": [invoice.model_dump(mode="json") for invoice in invoices],
        "count": len(invoices),
    }
    view_cache.set(INVOICES_VIEW_PATH, payload, generation)
    return payload


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice_view(
    invoice_id: str, db: DatabaseSessionManager = Depends(get_db_manager),
):
    return await get_invoice(db, InvoiceId(invoice_id))


# ─── Mutations ──────────────────────────────────────────────────

@router.post("")
async def create_invoice_form(
    request: Request,
    executor: InvoiceMutationExecutor = Depends(get_executor),
):
    """Create an invoice from the create form."""
    navigator = ResponseNavigator()
    action = await create_invoice(
        await read_draft(request), executor, _build_reporter(navigator),
    )
    if not action.ok:
        state = InvoiceFormState(errors=action.errors, message=action.message)
        return JSONResponse(
            status_code=422,
            content=state.model_dump(),
        )
    return navigator.to_response()


@router.post("/{invoice_id}/edit")
async def update_invoice_form(
    invoice_id: str,
    request: Request,
    executor: InvoiceMutationExecutor = Depends(get_executor),
):
    """Overwrite an invoice from the edit form."""
    navigator = ResponseNavigator()
    await update_invoice(
        InvoiceId(invoice_id), await read_draft(request),
        executor, _build_reporter(navigator),
    )
    return navigator.to_response()


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice_action(
    invoice_id: str,
    executor: InvoiceMutationExecutor = Depends(get_executor),
):
    navigator = ResponseNavigator()
    await delete_invoice(
        InvoiceId(invoice_id), executor, _build_reporter(navigator),
    )
    return navigator.to_response()

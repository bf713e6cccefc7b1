"""Invoice Schemas - form validation and response models for the invoice endpoints.

Invariants:
    - ValidatedInvoice is only ever built by pydantic validation (never partially)
    - validate_invoice aggregates ALL field errors, one message list per failing field
    - Error keys are wire field names (customerId, amount, status), never python names
    - amount_in_cents is exact: Decimal arithmetic, rounded half-even to whole cents
    - amount_in_cents >= 1: amounts that round to zero cents are rejected
    - id and date are not part of the mutable field set (route param / server-generated)

Design Decisions:
    - Each field maps to one fixed user message regardless of which rule failed
      (missing, wrong type, out of range); the pydantic message stays out of the UI
    - Decimal over float for amount: 49.99 must become 4999 cents, not 4998
"""

from collections.abc import Mapping
import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.domain_types import InvoiceStatus

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."

FIELD_MESSAGES: dict[str, str] = {
    "customerId": CUSTOMER_MESSAGE,
    "amount": AMOUNT_MESSAGE,
    "status": STATUS_MESSAGE,
}

_CENT = Decimal("1")


def _to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(_CENT, rounding=ROUND_HALF_EVEN))


class ValidatedInvoice(BaseModel):
    """Typed invoice fields accepted from the create/edit forms."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def at_least_one_cent(cls, v: Decimal) -> Decimal:
        try:
            cents = _to_cents(v)
        except InvalidOperation as e:
            raise ValueError("amount is out of range") from e
        if cents < 1:
            raise ValueError("amount rounds to zero cents")
        return v

    @property
    def amount_in_cents(self) -> int:
        return _to_cents(self.amount)


def validate_invoice(
    draft: Mapping[str, str | None],
) -> ValidatedInvoice | dict[str, list[str]]:
    """Validate a raw form draft. Returns the typed invoice or the field error set."""
    try:
        return ValidatedInvoice.model_validate(dict(draft))
    except ValidationError as exc:
        return collect_field_errors(exc)


def collect_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by wire field name, substituting the fixed messages."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error["loc"] else "form"
        message = FIELD_MESSAGES.get(field_name, error["msg"])
        messages = errors.setdefault(field_name, [])
        if message not in messages:
            messages.append(message)
    return errors


# --- Responses ----------------------------------------------------------------

class InvoiceFormState(BaseModel):
    """Form state returned to the create form when validation fails."""
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: str | None = None


class InvoiceResponse(BaseModel):
    """Invoice row as exposed by the read endpoints. amount is in cents."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: datetime.date

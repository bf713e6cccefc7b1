"""Invoice form validation - field rules, fixed messages, error aggregation, cents conversion.

Invariants:
    - Every failing field gets exactly its fixed message
    - All failing fields reported together, never just the first
    - id/date and unknown keys never reach ValidatedInvoice
    - amount_in_cents is exact for two-decimal amounts
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.domain_types import InvoiceStatus
from app.schemas.invoice import (
    AMOUNT_MESSAGE, CUSTOMER_MESSAGE, STATUS_MESSAGE,
    InvoiceFormState, ValidatedInvoice, validate_invoice,
)


def _draft(**overrides):
    draft = {"customerId": "c1", "amount": "49.99", "status": "pending"}
    draft.update(overrides)
    return draft


# --- Success ------------------------------------------------------------------

def test_valid_draft_returns_typed_invoice():
    result = validate_invoice(_draft())
    assert isinstance(result, ValidatedInvoice)
    assert result.customer_id == "c1"
    assert result.amount == Decimal("49.99")
    assert result.status is InvoiceStatus.PENDING


def test_paid_status_accepted():
    result = validate_invoice(_draft(status="paid"))
    assert result.status is InvoiceStatus.PAID


def test_id_and_date_are_ignored():
    result = validate_invoice(_draft(id="inv-9", date="1999-01-01", extra="x"))
    assert isinstance(result, ValidatedInvoice)
    assert not hasattr(result, "id")
    assert "date" not in result.model_dump()


def test_validated_invoice_is_frozen():
    result = validate_invoice(_draft())
    with pytest.raises(ValidationError):
        result.amount = Decimal("1")


# --- Cents conversion ---------------------------------------------------------

@pytest.mark.parametrize("raw, cents", [
    ("49.99", 4999),
    ("0.29", 29),
    ("1", 100),
    ("19.9", 1990),
    ("1234.56", 123456),
])
def test_amount_in_cents_is_exact(raw, cents):
    assert validate_invoice(_draft(amount=raw)).amount_in_cents == cents


def test_sub_cent_amount_rounds_half_even():
    assert validate_invoice(_draft(amount="0.125")).amount_in_cents == 12
    assert validate_invoice(_draft(amount="0.135")).amount_in_cents == 14


@pytest.mark.parametrize("raw", ["0.004", "0.005", "0.0001"])
def test_amount_rounding_to_zero_cents_rejected(raw):
    assert validate_invoice(_draft(amount=raw)) == {"amount": [AMOUNT_MESSAGE]}


def test_smallest_amount_rounding_to_one_cent_accepted():
    assert validate_invoice(_draft(amount="0.006")).amount_in_cents == 1


# --- Field errors -------------------------------------------------------------

def test_negative_amount_rejected():
    assert validate_invoice(_draft(amount="-5")) == {"amount": [AMOUNT_MESSAGE]}


@pytest.mark.parametrize("raw", ["0", "", "abc", "NaN", "Infinity", None])
def test_non_positive_or_non_numeric_amount_rejected(raw):
    assert validate_invoice(_draft(amount=raw)) == {"amount": [AMOUNT_MESSAGE]}


def test_unknown_status_rejected():
    assert validate_invoice(_draft(status="overdue")) == {"status": [STATUS_MESSAGE]}


@pytest.mark.parametrize("raw", [None, "", "PAID"])
def test_missing_or_miscased_status_rejected(raw):
    assert validate_invoice(_draft(status=raw)) == {"status": [STATUS_MESSAGE]}


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_customer_rejected(raw):
    assert validate_invoice(_draft(customerId=raw)) == {"customerId": [CUSTOMER_MESSAGE]}


def test_absent_keys_reported_for_every_field():
    assert validate_invoice({}) == {
        "customerId": [CUSTOMER_MESSAGE],
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }


def test_all_failing_fields_aggregated():
    errors = validate_invoice(_draft(amount="-5", status="overdue"))
    assert errors == {
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }


def test_valid_fields_never_reported():
    errors = validate_invoice(_draft(status="overdue"))
    assert "customerId" not in errors
    assert "amount" not in errors


# --- Form state ---------------------------------------------------------------

def test_form_state_defaults_to_empty():
    state = InvoiceFormState()
    assert state.model_dump() == {"errors": {}, "message": None}

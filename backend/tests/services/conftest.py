"""Service test fixtures - executor on the in-memory DB plus recording collaborators.

Invariants:
    - Executor always dates new invoices FIXED_TODAY
    - Recording collaborators capture every call in order
"""

import pytest

from app.services.invoice_executor import InvoiceMutationExecutor
from app.services.outcome_reporter import OutcomeReporter
from tests.services.fakes import (
    COLLECTION_PATH, FIXED_TODAY,
    RecordingInvalidator, RecordingNavigator, TrackingManager,
)


@pytest.fixture
def tracking_manager(db_manager):
    return TrackingManager(db_manager)


@pytest.fixture
def executor(tracking_manager):
    return InvoiceMutationExecutor(tracking_manager, today=lambda: FIXED_TODAY)


@pytest.fixture
def invalidator():
    return RecordingInvalidator()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def reporter(invalidator, navigator):
    return OutcomeReporter(invalidator, navigator, COLLECTION_PATH)

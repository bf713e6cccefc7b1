"""Invoice ORM - the single table every mutation targets.

Invariants:
    - id is an opaque string primary key (UUID4 text, generated in Python)
    - amount is integer cents, never floating dollars
    - date is the calendar date of creation and is never rewritten by updates

Design Decisions:
    - String id over native UUID: route parameters bind as-is, a malformed or
      unknown id simply matches zero rows
    - Table used through SQLAlchemy Core statements (insert/update/delete),
      one statement per request
"""

import uuid
import datetime

from sqlalchemy import String, Integer, Date
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def new_invoice_id() -> str:
    return str(uuid.uuid4())


class Invoice(Base):
    """Invoice row - customer reference, amount in cents, status, creation date."""
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_invoice_id,
    )
    customer_id: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from checkout.db.base import Base


# helpers
now = datetime.utcnow


class PaymentStatus:
    SUCCESS = "success"
    SUCCESS_MOCK = "success (mock)"
    FAILED = "failed"


class Payment(Base):
    """ledger entry, written once per verified payment and never updated."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    order_id: Mapped[str] = mapped_column(String(128))
    payment_id: Mapped[str] = mapped_column(String(128))
    signature: Mapped[str] = mapped_column(String(256))
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))  # major units, as sent by the client
    currency: Mapped[str] = mapped_column(String(8), default="INR")
    status: Mapped[str] = mapped_column(String(32))  # success|success (mock)|failed
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now, index=True)

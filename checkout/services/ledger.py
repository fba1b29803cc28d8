import logging
from decimal import Decimal
from datetime import datetime
from typing import Callable, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from checkout import models
from checkout.core.errors import StoreFailure

logger = logging.getLogger(__name__)


class PaymentLedger:
    """append/read/clear access to the payments table."""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.utcnow):
        self.db = db
        self.clock = clock

    def add(
        self,
        order_id: str,
        payment_id: str,
        signature: str,
        amount: Decimal,
        currency: str,
        status: str,
    ) -> models.Payment:
        payment = models.Payment(
            order_id=order_id,
            payment_id=payment_id,
            signature=signature,
            amount=amount,
            currency=currency,
            status=status,
            created_at=self.clock(),
        )
        try:
            self.db.add(payment)
            self.db.commit()
            self.db.refresh(payment)
        except SQLAlchemyError as e:
            self._fail("Failed to save payment", e)
        return payment

    def list(self, currency: Optional[str] = None, status: Optional[str] = None) -> List[models.Payment]:
        # newest first; id breaks ties between rows written within the same clock tick
        q = self.db.query(models.Payment)
        if currency:
            q = q.filter(models.Payment.currency == currency)
        if status:
            # plain substring match, user input must not act as a LIKE pattern
            needle = status.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            q = q.filter(models.Payment.status.ilike(f"%{needle}%", escape="\\"))
        try:
            return q.order_by(models.Payment.created_at.desc(), models.Payment.id.desc()).all()
        except SQLAlchemyError as e:
            self._fail("Failed to fetch payments", e)

    def summary(self) -> Dict:
        try:
            rows = (
                self.db.query(
                    models.Payment.currency,
                    func.count(models.Payment.id),
                    func.coalesce(func.sum(models.Payment.amount), 0),
                )
                .group_by(models.Payment.currency)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("Failed to summarize payments", e)

        by_currency = {currency: float(total) for currency, _, total in rows}
        return {
            "count": sum(count for _, count, _ in rows),
            "total": float(sum(Decimal(str(total)) for _, _, total in rows)),
            "by_currency": by_currency,
        }

    def clear(self) -> int:
        try:
            deleted = self.db.query(models.Payment).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("Failed to clear payment history", e)
        logger.info(f"Cleared {deleted} payment(s) from the ledger")
        return deleted

    def _fail(self, message: str, error: Exception):
        logger.exception(f"{message}: {error}")
        self.db.rollback()
        raise StoreFailure(message) from error

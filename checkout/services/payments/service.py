import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from checkout import models
from checkout.core.errors import InvalidAmount, MissingFields, OperationNotPermitted, UnexpectedFailure
from checkout.models import PaymentStatus
from checkout.services.ledger import PaymentLedger
from .base import PaymentGateway
from .mock import SimulatedGateway

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "INR"


def parse_amount(value: Any) -> Decimal:
    """major-unit amount from client input, InvalidAmount unless positive and finite."""
    if value is None or isinstance(value, bool):
        raise InvalidAmount()
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidAmount()
    if math.isnan(number) or math.isinf(number) or number <= 0:
        raise InvalidAmount()
    return Decimal(str(number))


def to_minor_units(amount: Decimal) -> int:
    # half-up, the way browser clients round with Math.round
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def ledger_amount(value: Any) -> Decimal:
    """amount as supplied by the client, unvalidated beyond being storable."""
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise UnexpectedFailure("Failed to verify payment") from e
    if not amount.is_finite():
        raise UnexpectedFailure("Failed to verify payment")
    return amount


class VerificationResult:
    def __init__(self, verified: bool, message: str, payment: Optional[models.Payment] = None):
        self.verified = verified
        self.message = message
        self.payment = payment


class PaymentService:
    """order creation, payment verification and ledger access.

    `simulator` backs the combined mock endpoint; it is the configured gateway
    itself in mock mode and a fresh SimulatedGateway otherwise.
    """

    def __init__(self, gateway: PaymentGateway, ledger: PaymentLedger, simulator: SimulatedGateway | None = None):
        self.gateway = gateway
        self.ledger = ledger
        if simulator is None:
            simulator = gateway if isinstance(gateway, SimulatedGateway) else SimulatedGateway()
        self.simulator = simulator

    @property
    def live(self) -> bool:
        return self.gateway.live

    def create_order(self, amount: Any, currency: Optional[str] = None) -> Dict[str, Any]:
        major = parse_amount(amount)
        return self.gateway.create_order(to_minor_units(major), currency or DEFAULT_CURRENCY)

    def verify_payment(
        self,
        order_id: Optional[str],
        payment_id: Optional[str],
        signature: Optional[str],
        amount: Any,
        currency: Optional[str] = None,
    ) -> VerificationResult:
        if not order_id or not payment_id or not signature or not amount:
            raise MissingFields()

        if not self.gateway.verify(order_id, payment_id, signature):
            # rejected confirmations are not written to the ledger
            return VerificationResult(False, "Invalid signature")

        payment = self.ledger.add(
            order_id=order_id,
            payment_id=payment_id,
            signature=signature,
            amount=ledger_amount(amount),
            currency=currency or DEFAULT_CURRENCY,
            status=self.gateway.success_status,
        )
        if self.live:
            message = "Payment verified successfully"
        else:
            message = "Mock payment verified successfully! (This is a test payment)"
        return VerificationResult(True, message, payment)

    def mock_payment(self, amount: Any, currency: Optional[str] = None) -> Dict[str, Any]:
        major = parse_amount(amount)
        currency = currency or DEFAULT_CURRENCY

        order = self.simulator.create_order(to_minor_units(major), currency)
        confirmation = self.simulator.simulate_payment(order["id"])
        saved = self.ledger.add(
            order_id=order["id"],
            payment_id=confirmation["razorpay_payment_id"],
            signature=confirmation["razorpay_signature"],
            amount=major,
            currency=currency,
            status=PaymentStatus.SUCCESS_MOCK,
        )
        logger.info(f"Mock payment completed: {saved.payment_id} for {order['id']}")
        return {
            "success": True,
            "message": "Mock payment completed successfully!",
            "order": order,
            "payment": confirmation,
            "saved_payment": saved,
        }

    def list_payments(self, currency: Optional[str] = None, status: Optional[str] = None) -> List[models.Payment]:
        return self.ledger.list(currency=currency, status=status)

    def summary(self) -> Dict[str, Any]:
        return self.ledger.summary()

    def clear_payments(self) -> int:
        if self.live:
            raise OperationNotPermitted()
        return self.ledger.clear()

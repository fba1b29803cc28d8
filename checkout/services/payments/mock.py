"""Simulated gateway used when no real Razorpay credentials are configured.

Orders and payment confirmations are synthesized locally and every
verification succeeds after a short artificial delay.
"""
import logging
import secrets
import string
import time
from typing import Any, Callable, Dict

from checkout.models import PaymentStatus
from .base import PaymentGateway

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


class MockIds:
    """clock and random token source for synthesized identifiers."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def token(self, length: int = 9) -> str:
        return "".join(secrets.choice(_BASE36) for _ in range(length))


def generate_mock_order(amount_minor: int, currency: str, ids: MockIds) -> Dict[str, Any]:
    stamp = ids.now_ms()
    return {
        "id": f"mock_order_{stamp}",
        "amount": amount_minor,
        "currency": currency,
        "receipt": f"mock_receipt_{stamp}",
        "status": "created",
    }


def generate_mock_payment(order_id: str, ids: MockIds) -> Dict[str, str]:
    return {
        "razorpay_order_id": order_id,
        "razorpay_payment_id": f"mock_payment_{ids.now_ms()}",
        "razorpay_signature": f"mock_signature_{ids.token()}",
    }


class SimulatedGateway(PaymentGateway):
    live = False
    mode = "Mock Payment System"
    success_status = PaymentStatus.SUCCESS_MOCK

    def __init__(
        self,
        ids: MockIds | None = None,
        sleep: Callable[[float], None] = time.sleep,
        verify_delay: float = 1.0,
        payment_delay: float = 2.0,
    ):
        self.ids = ids or MockIds()
        self.sleep = sleep
        self.verify_delay = verify_delay
        self.payment_delay = payment_delay

    def create_order(self, amount_minor: int, currency: str) -> Dict[str, Any]:
        order = generate_mock_order(amount_minor, currency, self.ids)
        logger.info(f"Mock order created: {order['id']} ({amount_minor} {currency})")
        return order

    def verify(self, order_id: str, payment_id: str, signature: str) -> bool:
        # no cryptographic check, just emulate the round trip
        logger.info(f"Mock payment verification: order={order_id} payment={payment_id}")
        self.sleep(self.verify_delay)
        return True

    def simulate_payment(self, order_id: str) -> Dict[str, str]:
        """wait out the checkout latency and hand back a confirmation for order_id."""
        self.sleep(self.payment_delay)
        return generate_mock_payment(order_id, self.ids)

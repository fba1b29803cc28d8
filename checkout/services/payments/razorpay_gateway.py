"""Razorpay gateway adapter.

Orders are created through the official `razorpay` SDK. Payment
confirmations are checked locally: Razorpay signs `order_id|payment_id`
with the key secret using HMAC-SHA256.
"""
import logging
from typing import Any, Dict

import razorpay
from razorpay.errors import BadRequestError

from checkout.core.errors import AuthenticationFailed, OrderCreationFailed
from checkout.models import PaymentStatus
from .base import PaymentGateway
from .mock import MockIds

logger = logging.getLogger(__name__)


class RazorpayGateway(PaymentGateway):
    live = True
    mode = "Razorpay"
    success_status = PaymentStatus.SUCCESS

    def __init__(self, key_id: str, key_secret: str, client: Any = None, ids: MockIds | None = None):
        self.key_id = key_id
        self.key_secret = key_secret
        self.client = client or razorpay.Client(auth=(key_id, key_secret))
        self.ids = ids or MockIds()

    def _receipt(self) -> str:
        # timestamp plus random suffix keeps receipts unique per request
        return f"receipt_{self.ids.now_ms()}_{self.ids.token(6)}"

    def create_order(self, amount_minor: int, currency: str) -> Dict[str, Any]:
        payload = {
            "amount": amount_minor,
            "currency": currency,
            "receipt": self._receipt(),
        }
        try:
            return self.client.order.create(payload)
        except BadRequestError as e:
            description = str(e)
            if "authentication" in description.lower():
                logger.error("Razorpay authentication failed. Check RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET in .env.")
                raise AuthenticationFailed(details=description) from e
            logger.error(f"Error creating Razorpay order: {description}")
            raise OrderCreationFailed(details=description) from e
        except Exception as e:
            logger.error(f"Error creating Razorpay order: {e}")
            raise OrderCreationFailed(details=str(e)) from e

    def verify(self, order_id: str, payment_id: str, signature: str) -> bool:
        ok = self.verify_signature(self.key_secret, order_id, payment_id, signature)
        if not ok:
            logger.warning(f"Razorpay signature mismatch for order {order_id}")
        return ok

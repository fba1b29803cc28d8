from typing import Any, Dict
import hmac
import hashlib


class PaymentGateway:
    """base payment gateway interface.

    A gateway is picked once at startup (see factory.get_payment_gateway) and
    shared by every request for the lifetime of the process.
    """

    live: bool = False
    mode: str = ""
    success_status: str = ""

    def create_order(self, amount_minor: int, currency: str) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError

    def verify(self, order_id: str, payment_id: str, signature: str) -> bool:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
        body = f"{order_id}|{payment_id}".encode("utf-8")
        return hmac.new((secret or "").encode("utf-8"), body, hashlib.sha256).hexdigest()

    @classmethod
    def verify_signature(cls, secret: str, order_id: str, payment_id: str, signature: str) -> bool:
        computed = cls.compute_signature(secret, order_id, payment_id)
        return hmac.compare_digest(computed.encode("utf-8"), (signature or "").encode("utf-8"))

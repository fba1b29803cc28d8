from typing import Any, Optional


class PaymentError(Exception):
    """base error for the order/verification core.

    status_code is the HTTP status the API answers with.
    """

    status_code: int = 500
    default_message: str = "Payment operation failed"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_detail(self) -> Any:
        if self.details is None:
            return self.message
        return {"error": self.message, "details": self.details}


class InvalidAmount(PaymentError):
    status_code = 400
    default_message = "Invalid amount"


class MissingFields(PaymentError):
    status_code = 400
    default_message = "Missing required payment fields"


class AuthenticationFailed(PaymentError):
    status_code = 401
    default_message = "Razorpay authentication failed. Please check your API keys."


class OrderCreationFailed(PaymentError):
    status_code = 500
    default_message = "Failed to create Razorpay order"


class OperationNotPermitted(PaymentError):
    status_code = 403
    default_message = "Not allowed in Razorpay mode"


class StoreFailure(PaymentError):
    status_code = 500
    default_message = "Payment store unavailable"


class UnexpectedFailure(PaymentError):
    status_code = 500
    default_message = "Unexpected payment failure"

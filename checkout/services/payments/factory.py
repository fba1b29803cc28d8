import logging

from checkout.core.config import Settings, settings as default_settings
from .base import PaymentGateway
from .mock import SimulatedGateway
from .razorpay_gateway import RazorpayGateway

logger = logging.getLogger(__name__)

# values shipped in env.example and docs, never real credentials
DUMMY_KEYS = frozenset({
    "your_key_id",
    "your_key_secret",
    "rzp_test_YOUR_KEY_ID",
    "rzp_test_YOUR_KEY_SECRET",
})


def is_dummy_key(key: str | None) -> bool:
    if not key or not key.strip():
        return True
    return key.strip() in DUMMY_KEYS


def live_mode_enabled(key_id: str | None, key_secret: str | None) -> bool:
    return not is_dummy_key(key_id) and not is_dummy_key(key_secret)


def get_payment_gateway(settings: Settings | None = None) -> PaymentGateway:
    settings = settings or default_settings
    if live_mode_enabled(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET):
        logger.info("Razorpay integration enabled")
        return RazorpayGateway(settings.RAZORPAY_KEY_ID.strip(), settings.RAZORPAY_KEY_SECRET.strip())
    logger.warning("Razorpay keys not found or are dummy - using mock payment system")
    return SimulatedGateway(
        verify_delay=settings.MOCK_VERIFY_DELAY_SECONDS,
        payment_delay=settings.MOCK_PAYMENT_DELAY_SECONDS,
    )

import hashlib
import hmac

import pytest
from razorpay.errors import BadRequestError, ServerError

from checkout.core.errors import AuthenticationFailed, OrderCreationFailed
from checkout.services.payments.base import PaymentGateway
from checkout.services.payments.mock import generate_mock_order, generate_mock_payment

from conftest import FixedIds, LIVE_SECRET


def _sign(order_id, payment_id, secret=LIVE_SECRET):
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class TestSignature:
    def test_compute_signature_matches_razorpay_scheme(self):
        assert PaymentGateway.compute_signature(LIVE_SECRET, "order_1", "pay_1") == _sign("order_1", "pay_1")

    def test_verify_signature_rejects_other_values(self):
        good = _sign("order_1", "pay_1")
        assert PaymentGateway.verify_signature(LIVE_SECRET, "order_1", "pay_1", good) is True
        assert PaymentGateway.verify_signature(LIVE_SECRET, "order_1", "pay_2", good) is False
        assert PaymentGateway.verify_signature("other", "order_1", "pay_1", good) is False
        assert PaymentGateway.verify_signature(LIVE_SECRET, "order_1", "pay_1", good.upper()) is False

    def test_verify_signature_handles_non_ascii_input(self):
        assert PaymentGateway.verify_signature(LIVE_SECRET, "order_1", "pay_1", "sig-ü") is False


class TestMockGenerators:
    def test_mock_order_shape(self):
        order = generate_mock_order(10000, "INR", FixedIds(start=100))
        assert order == {
            "id": "mock_order_101",
            "amount": 10000,
            "currency": "INR",
            "receipt": "mock_receipt_101",
            "status": "created",
        }

    def test_mock_payment_shape(self):
        payment = generate_mock_payment("mock_order_1", FixedIds(start=200, token="abcdefghi"))
        assert payment == {
            "razorpay_order_id": "mock_order_1",
            "razorpay_payment_id": "mock_payment_201",
            "razorpay_signature": "mock_signature_abcdefghi",
        }

    def test_default_token_is_base36(self):
        from checkout.services.payments.mock import MockIds

        token = MockIds().token()
        assert len(token) == 9
        assert all(c in "0123456789abcdefghijklmnopqrstuvwxyz" for c in token)


class TestSimulatedGateway:
    def test_create_order_never_fails(self, simulated_gateway):
        order = simulated_gateway.create_order(5000, "USD")
        assert order["id"].startswith("mock_order_")
        assert order["amount"] == 5000
        assert order["currency"] == "USD"
        assert order["status"] == "created"

    def test_verify_always_succeeds_after_delay(self, simulated_gateway, sleeper):
        assert simulated_gateway.verify("anything", "p1", "not-a-signature") is True
        assert sleeper.calls == [1.0]

    def test_simulate_payment_waits_payment_delay(self, simulated_gateway, sleeper):
        payment = simulated_gateway.simulate_payment("mock_order_1")
        assert payment["razorpay_order_id"] == "mock_order_1"
        assert sleeper.calls == [2.0]


class TestRazorpayGateway:
    def test_create_order_sends_minor_units_and_unique_receipts(self, live_gateway, razorpay_client):
        first = live_gateway.create_order(10000, "INR")
        live_gateway.create_order(2550, "EUR")

        assert first["id"] == "order_EKwxwAgItmmXdp"
        sent = razorpay_client.order.created
        assert sent[0]["amount"] == 10000
        assert sent[0]["currency"] == "INR"
        assert sent[1]["amount"] == 2550
        assert sent[0]["receipt"].startswith("receipt_")
        assert sent[0]["receipt"] != sent[1]["receipt"]

    def test_authentication_error_is_reported(self, live_gateway, razorpay_client):
        razorpay_client.order.error = BadRequestError("Authentication failed")
        with pytest.raises(AuthenticationFailed) as exc:
            live_gateway.create_order(100, "INR")
        assert exc.value.status_code == 401
        assert exc.value.details == "Authentication failed"

    def test_other_bad_request_is_order_failure(self, live_gateway, razorpay_client):
        razorpay_client.order.error = BadRequestError("Order amount less than minimum amount allowed")
        with pytest.raises(OrderCreationFailed) as exc:
            live_gateway.create_order(1, "INR")
        assert exc.value.status_code == 500
        assert "minimum amount" in exc.value.details

    def test_server_error_is_order_failure(self, live_gateway, razorpay_client):
        razorpay_client.order.error = ServerError("The server encountered an error")
        with pytest.raises(OrderCreationFailed):
            live_gateway.create_order(100, "INR")

    def test_verify_checks_hmac(self, live_gateway):
        assert live_gateway.verify("order_1", "pay_1", _sign("order_1", "pay_1")) is True
        assert live_gateway.verify("order_1", "pay_1", "mock_signature_abc") is False

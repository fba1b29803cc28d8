import os

# point the app at a throwaway database and force mock mode before anything imports settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RAZORPAY_KEY_ID"] = ""
os.environ["RAZORPAY_KEY_SECRET"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from checkout.db.base import Base
from checkout.db.session import get_db
from checkout.main import create_app
from checkout.services.ledger import PaymentLedger
from checkout.services.payments.mock import MockIds, SimulatedGateway
from checkout.services.payments.razorpay_gateway import RazorpayGateway

LIVE_KEY_ID = "rzp_test_1DP5mmOlF5G5ag"
LIVE_SECRET = "thisisasupersecret"


class FixedIds(MockIds):
    """deterministic ids: the clock ticks by one millisecond per call."""

    def __init__(self, start: int = 1700000000000, token: str = "k3y9z0abc"):
        self.current = start
        self.fixed_token = token

    def now_ms(self) -> int:
        self.current += 1
        return self.current

    def token(self, length: int = 9) -> str:
        return self.fixed_token[:length]


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds: float):
        self.calls.append(seconds)


class _FakeOrders:
    def __init__(self):
        self.created = []
        self.error = None

    def create(self, payload):
        if self.error is not None:
            raise self.error
        self.created.append(payload)
        return {
            "id": "order_EKwxwAgItmmXdp",
            "entity": "order",
            "amount": payload["amount"],
            "amount_paid": 0,
            "amount_due": payload["amount"],
            "currency": payload["currency"],
            "receipt": payload["receipt"],
            "status": "created",
            "attempts": 0,
        }


class FakeRazorpayClient:
    def __init__(self):
        self.order = _FakeOrders()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def ledger(db):
    return PaymentLedger(db)


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def ids():
    return FixedIds()


@pytest.fixture
def simulated_gateway(ids, sleeper):
    return SimulatedGateway(ids=ids, sleep=sleeper, verify_delay=1.0, payment_delay=2.0)


@pytest.fixture
def razorpay_client():
    return FakeRazorpayClient()


@pytest.fixture
def live_gateway(razorpay_client, ids):
    return RazorpayGateway(LIVE_KEY_ID, LIVE_SECRET, client=razorpay_client, ids=ids)


def _client_for(gateway, session_factory, sleeper):
    app = create_app(gateway)
    if not isinstance(gateway, SimulatedGateway):
        app.state.simulator = SimulatedGateway(ids=FixedIds(), sleep=sleeper)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def mock_client(simulated_gateway, session_factory, sleeper):
    return _client_for(simulated_gateway, session_factory, sleeper)


@pytest.fixture
def live_client(live_gateway, session_factory, sleeper):
    return _client_for(live_gateway, session_factory, sleeper)

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from checkout.db.session import get_db
from checkout.services.ledger import PaymentLedger
from checkout.services.payments.base import PaymentGateway
from checkout.services.payments.service import PaymentService


def get_gateway(request: Request) -> PaymentGateway:
    # selected once in create_app, never swapped at runtime
    return request.app.state.gateway


def get_payment_service(
    request: Request,
    gateway: PaymentGateway = Depends(get_gateway),
    db: Session = Depends(get_db),
) -> PaymentService:
    return PaymentService(gateway, PaymentLedger(db), simulator=getattr(request.app.state, "simulator", None))

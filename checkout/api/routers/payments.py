import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from checkout.api.deps import get_payment_service
from checkout.core.errors import PaymentError
from checkout.schemas.payments import (
    ClearPaymentsResponse,
    MockPaymentResponse,
    OrderCreateRequest,
    PaymentOut,
    PaymentSummary,
    PaymentVerifyRequest,
    PaymentVerifyResponse,
)
from checkout.services.payments.service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


def _http_error(e: PaymentError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.post("/create-order")
def create_order(payload: OrderCreateRequest, service: PaymentService = Depends(get_payment_service)):
    try:
        return service.create_order(payload.amount, payload.currency)
    except PaymentError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Error creating order")
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.post("/verify-payment", response_model=PaymentVerifyResponse)
def verify_payment(payload: PaymentVerifyRequest, service: PaymentService = Depends(get_payment_service)):
    try:
        result = service.verify_payment(
            order_id=payload.order_id,
            payment_id=payload.payment_id,
            signature=payload.signature,
            amount=payload.amount,
            currency=payload.currency,
        )
    except PaymentError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Error verifying payment")
        raise HTTPException(status_code=500, detail="Failed to verify payment")

    if not result.verified:
        return JSONResponse(status_code=400, content={"verified": False, "message": result.message})
    return PaymentVerifyResponse(verified=True, message=result.message)


@router.get("/payments", response_model=List[PaymentOut])
def list_payments(
    currency: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    service: PaymentService = Depends(get_payment_service),
):
    try:
        return service.list_payments(currency=currency, status=status)
    except PaymentError as e:
        raise HTTPException(status_code=e.status_code, detail="Failed to fetch payments")


@router.get("/payments/summary", response_model=PaymentSummary)
def payments_summary(service: PaymentService = Depends(get_payment_service)):
    try:
        return PaymentSummary(**service.summary())
    except PaymentError as e:
        raise HTTPException(status_code=e.status_code, detail="Failed to summarize payments")


@router.delete("/payments", response_model=ClearPaymentsResponse)
def clear_payments(service: PaymentService = Depends(get_payment_service)):
    try:
        service.clear_payments()
    except PaymentError as e:
        raise _http_error(e)
    return ClearPaymentsResponse(success=True, message="Payment history cleared")


@router.post("/mock-payment", response_model=MockPaymentResponse)
def mock_payment(payload: OrderCreateRequest, service: PaymentService = Depends(get_payment_service)):
    try:
        res = service.mock_payment(payload.amount, payload.currency)
    except PaymentError as e:
        if e.status_code >= 500:
            raise HTTPException(status_code=500, detail="Mock payment failed")
        raise _http_error(e)
    except Exception:
        logger.exception("Error in mock payment")
        raise HTTPException(status_code=500, detail="Mock payment failed")
    return MockPaymentResponse(
        success=res["success"],
        message=res["message"],
        order=res["order"],
        payment=res["payment"],
        saved_payment=PaymentOut.model_validate(res["saved_payment"]),
    )

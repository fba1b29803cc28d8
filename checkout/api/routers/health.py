from fastapi import APIRouter, Depends

from checkout.api.deps import get_gateway
from checkout.schemas.payments import HealthResponse
from checkout.services.payments.base import PaymentGateway

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(gateway: PaymentGateway = Depends(get_gateway)):
    return HealthResponse(message="Server is running!", mode=gateway.mode)

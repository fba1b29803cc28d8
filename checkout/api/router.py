from fastapi import APIRouter

from checkout.api.routers import health as health_router
from checkout.api.routers import payments as payments_router

router = APIRouter()

router.include_router(health_router.router)
router.include_router(payments_router.router)

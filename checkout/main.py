import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from checkout.core.config import settings
from checkout.db.base import Base
from checkout.db.session import engine
from checkout.api.router import router as api_router
from checkout.services.payments.base import PaymentGateway
from checkout.services.payments.factory import get_payment_gateway
from checkout.services.payments.mock import SimulatedGateway

logger = logging.getLogger(__name__)


def configure_logging():
    # no-op once the root logger has handlers
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(gateway: PaymentGateway | None = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title="Payment Checkout API", version="0.1.0")

    # gateway is chosen exactly once per process
    app.state.gateway = gateway or get_payment_gateway(settings)
    if isinstance(app.state.gateway, SimulatedGateway):
        app.state.simulator = app.state.gateway
    else:
        app.state.simulator = SimulatedGateway(
            verify_delay=settings.MOCK_VERIFY_DELAY_SECONDS,
            payment_delay=settings.MOCK_PAYMENT_DELAY_SECONDS,
        )

    # set up CORS so the browser client can talk to us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # mount our API routes
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    def on_startup():
        Base.metadata.create_all(bind=engine)

    # serve the compiled client in production, after the API so /api wins
    build_dir = Path(settings.CLIENT_BUILD_DIR)
    if settings.APP_ENV == "production" and build_dir.is_dir():
        app.mount("/", StaticFiles(directory=build_dir, html=True), name="client")

    return app


app = create_app()


def run():
    import uvicorn

    logger.info(f"Server running on port {settings.APP_PORT}")
    logger.info(f"Health check: http://localhost:{settings.APP_PORT}/api/health")
    if not app.state.gateway.live:
        logger.info(f"Mock payment endpoint: http://localhost:{settings.APP_PORT}/api/mock-payment")
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()

import os
from typing import List
from dotenv import load_dotenv

# grab env vars from .env file
load_dotenv()


class Settings:
    # app settings
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT") or os.getenv("PORT") or "5000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS stuff
    _origins_raw: str = os.getenv("ALLOWED_ORIGINS", "*")
    ALLOWED_ORIGINS: List[str] = [o.strip() for o in _origins_raw.split(",") if o.strip()] if _origins_raw else ["*"]

    # ledger store
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./payments.db")

    # razorpay credentials; empty or placeholder values fall back to the mock gateway
    RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID", "")
    RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET", "")

    # artificial latency of the simulated gateway
    MOCK_VERIFY_DELAY_SECONDS: float = float(os.getenv("MOCK_VERIFY_DELAY_SECONDS", "1.0"))
    MOCK_PAYMENT_DELAY_SECONDS: float = float(os.getenv("MOCK_PAYMENT_DELAY_SECONDS", "2.0"))

    # compiled browser client, served in production only
    CLIENT_BUILD_DIR: str = os.getenv("CLIENT_BUILD_DIR", "client/build")


settings = Settings()

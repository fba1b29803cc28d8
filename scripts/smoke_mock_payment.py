#!/usr/bin/env python3
"""
Smoke test for a running checkout server in mock mode.

This script:
- Checks the health endpoint and reports the payment mode
- Runs one combined mock payment and prints the saved record
- Runs a few more mock payments in different currencies
- Reports the ledger size before and after

Usage:
    python scripts/smoke_mock_payment.py [--base-url http://localhost:5000]
"""

import sys
import argparse
import logging

import httpx

# configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SCENARIOS = [
    {"amount": 50, "currency": "USD"},
    {"amount": 75, "currency": "EUR"},
    {"amount": 200, "currency": "INR"},
]


def run_smoke(base_url: str) -> bool:
    # the mock endpoint sleeps server-side, leave room for it
    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        health = client.get("/api/health").json()
        logger.info(f"Server status: {health['message']} (mode: {health['mode']})")

        res = client.post("/api/mock-payment", json={"amount": 100, "currency": "INR"})
        res.raise_for_status()
        saved = res.json()["savedPayment"]
        logger.info(f"Mock payment saved: {saved['amount']} {saved['currency']} order={saved['orderId']} status={saved['status']}")

        history = client.get("/api/payments").json()
        logger.info(f"Found {len(history)} payments in history")
        if history:
            latest = history[0]
            logger.info(f"Latest payment: {latest['amount']} {latest['currency']} {latest['status']} at {latest['createdAt']}")

        for scenario in SCENARIOS:
            client.post("/api/mock-payment", json=scenario).raise_for_status()
            logger.info(f"{scenario['amount']} {scenario['currency']} payment completed")

        final = client.get("/api/payments").json()
        logger.info(f"Total payments in database: {len(final)}")
        return len(final) >= len(history) + len(SCENARIOS)


def main():
    parser = argparse.ArgumentParser(description="Smoke test the mock payment flow")
    parser.add_argument("--base-url", default="http://localhost:5000", help="Server base URL")
    args = parser.parse_args()

    try:
        ok = run_smoke(args.base_url)
    except httpx.HTTPError as e:
        logger.error(f"Smoke test failed: {e}")
        sys.exit(1)

    if not ok:
        logger.error("Ledger did not grow by the expected number of payments")
        sys.exit(1)
    logger.info("All smoke checks passed")


if __name__ == "__main__":
    main()

"""Stand-in for the Razorpay orders API.

No network call is made; the returned order mirrors the shape of a Razorpay
order so clients can be built against it.
"""
import time
from typing import Optional

GATEWAY_NAME = "razorpay"


class MockRazorpayClient:
    name = GATEWAY_NAME

    def create_order(self, amount: float, currency: str, receipt: Optional[str] = None) -> dict:
        stamp = int(time.time() * 1000)
        return {
            "id": f"order_{stamp}",
            "amount": round(amount * 100),  # minor units (paise)
            "currency": currency,
            "receipt": receipt or f"receipt_{stamp}",
            "status": "created",
        }


payment_gateway = MockRazorpayClient()


def get_payment_gateway() -> MockRazorpayClient:
    return payment_gateway

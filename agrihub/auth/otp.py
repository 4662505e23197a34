"""One-time passwords for phone verification.

A single outstanding challenge is kept per phone number: issuing a new code
replaces the previous one. Codes are logged instead of being sent by SMS.
"""
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from agrihub.core.config import settings

logger = logging.getLogger(__name__)


def generate_otp(length: int = 6) -> str:
    """Generate a random numeric OTP of the given length (no leading zero)."""
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))


@dataclass
class OTPRecord:
    phone: str
    code: str
    expires_at: float
    pending_user: Optional[Dict[str, Any]] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at < now

    def matches(self, code: str) -> bool:
        return secrets.compare_digest(self.code.encode(), code.encode())


class OTPStore:
    """In-process OTP store keyed by phone number.

    Requests are served from a thread pool, so every access goes through the
    lock. Two near-simultaneous requests for the same phone still race and
    the last one wins.
    """

    def __init__(
        self,
        ttl_seconds: int = 300,
        length: int = 6,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.length = length
        self._clock = clock
        self._records: Dict[str, OTPRecord] = {}
        self._lock = threading.Lock()

    def issue(self, phone: str, pending_user: Optional[Dict[str, Any]] = None) -> str:
        code = generate_otp(self.length)
        record = OTPRecord(
            phone=phone,
            code=code,
            expires_at=self._clock() + self.ttl_seconds,
            pending_user=pending_user,
        )
        with self._lock:
            self._records[phone] = record
        # In production, send SMS
        logger.info(f"OTP for {phone}: {code}")
        return code

    def get(self, phone: str) -> Optional[OTPRecord]:
        with self._lock:
            record = self._records.get(phone)
            if record is not None and record.is_expired(self._clock()):
                del self._records[phone]
                return None
            return record

    def discard(self, phone: str) -> None:
        with self._lock:
            self._records.pop(phone, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


otp_store = OTPStore(ttl_seconds=settings.otp_ttl_seconds, length=settings.otp_length)


def get_otp_store() -> OTPStore:
    return otp_store

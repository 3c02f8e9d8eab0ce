import secrets
from datetime import datetime, timedelta
from typing import Callable, Tuple

from src.domain.base import utcnow

RESET_TOKEN_TTL = timedelta(hours=1)


class ResetTokenGenerator:
    """
    Issues 6-digit numeric password reset PINs.

    The keyspace is only 900,000 values, so the PIN relies on the one-hour
    window and the CSPRNG from ``secrets`` rather than on its length.
    """

    def __init__(self, ttl: timedelta = RESET_TOKEN_TTL, clock: Callable[[], datetime] = utcnow):
        self.ttl = ttl
        self.clock = clock

    def generate(self) -> Tuple[str, datetime]:
        token = str(100000 + secrets.randbelow(900000))
        return token, self.clock() + self.ttl

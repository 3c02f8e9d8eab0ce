from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from libs.result import Error, Result, Return

ALGORITHM = "HS256"


class SessionTokenCodec:
    """
    Signs and verifies session tokens (HS256 JWT carrying the user id as ``sub``).

    The secret and lifetime are fixed when the codec is constructed at startup.
    """

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=1)):
        if not secret:
            raise ValueError("Session signing secret must not be empty")
        self._secret = secret
        self.ttl = ttl

    def issue(self, user_id: UUID) -> str:
        """
        Generate a session token.

        Args:
            user_id: User UUID

        Returns:
            JWT token string expiring ``ttl`` after issuance
        """
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Result[str]:
        """
        Verify a session token.

        Returns:
            Result with the subject id, or an Error whose code says why the
            token was rejected (TOKEN_EXPIRED, INVALID_SIGNATURE, INVALID_TOKEN).
            Callers must not reveal the difference to clients.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            return Return.err(Error("TOKEN_EXPIRED", "Session token has expired"))
        except JWTError as exc:
            return Return.err(Error("INVALID_SIGNATURE", "Session token is invalid", reason=str(exc)))

        subject = payload.get("sub")
        if not subject:
            return Return.err(Error("INVALID_TOKEN", "Session token has no subject"))
        return Return.ok(subject)

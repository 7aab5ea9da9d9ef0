"""Password hashing and identity tokens."""

import asyncio
import base64
import binascii
import logging
import secrets
import string
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from jobboard.core.config import settings
from jobboard.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_letters + string.digits
BCRYPT_MAX_BYTES = 72


def generate_password(length: int | None = None) -> str:
    """Generate a random alphanumeric password."""
    size = length or settings.temporary_password_length
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(size))


async def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt.

    bcrypt is CPU bound, so the work runs in a worker thread.
    """
    raw = password.encode("utf-8")
    if not raw:
        raise ValidationError("Password cannot be empty")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.password_hash_rounds)
    hashed = await asyncio.to_thread(bcrypt.hashpw, raw, salt)
    return hashed.decode("utf-8")


async def verify_password(password_hash: str | None, password: str) -> bool:
    """Compare a password against a stored bcrypt hash in constant time."""
    if not password_hash or not password:
        return False
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return await asyncio.to_thread(
            bcrypt.checkpw, raw, password_hash.encode("utf-8")
        )
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


class TokenIssuer:
    """Mints and validates signed, time-bound identity tokens.

    Tokens are HS256 JWTs carrying the applicant public id in ``sub``. The
    header form is the JWT base64-encoded once more, which is what clients
    send as ``Authorization: Bearer <token>``.
    """

    def __init__(
        self,
        secret: str,
        expire_minutes: int,
        algorithm: str = "HS256",
    ):
        self.secret = secret
        self.expire_minutes = expire_minutes
        self.algorithm = algorithm

    def issue(self, public_id: str, now: datetime | None = None) -> str:
        """Return a signed JWT for the given public id."""
        if not public_id:
            raise ValidationError("Public id is required to issue a token")
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": public_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    @staticmethod
    def encode_for_header(token: str) -> str:
        """Base64-encode a JWT for header transport."""
        return base64.b64encode(token.encode("utf-8")).decode("ascii")

    def issue_for_header(self, public_id: str) -> str:
        """Issue a token already encoded for the Authorization header."""
        return self.encode_for_header(self.issue(public_id))

    def validate(self, header_token: str | None) -> str | None:
        """Return the public id carried by a header token, or None if invalid."""
        if not header_token:
            return None
        try:
            token = base64.b64decode(header_token, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            logger.debug("Rejected token that is not valid base64")
            return None

        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.PyJWTError as e:
            logger.debug(f"Rejected invalid token: {e}")
            return None

        public_id = claims.get("sub")
        if not isinstance(public_id, str) or not public_id:
            return None
        return public_id


def get_token_issuer() -> TokenIssuer:
    """Build the token issuer from settings."""
    return TokenIssuer(
        secret=settings.token_secret,
        expire_minutes=settings.token_expire_minutes,
        algorithm=settings.token_algorithm,
    )

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from app.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# bcrypt only looks at the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


class Hasher:
    @staticmethod
    def _truncate_password(password: str) -> str:
        """
        Truncate password to 72 bytes for bcrypt compatibility.
        Ensures we don't break multi-byte UTF-8 characters.
        """
        encoded = password.encode("utf-8")
        if len(encoded) <= BCRYPT_MAX_BYTES:
            return password

        truncated = encoded[:BCRYPT_MAX_BYTES]
        return truncated.decode("utf-8", errors="ignore")

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(Hasher._truncate_password(password))

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        try:
            return pwd_context.verify(Hasher._truncate_password(plain_password), hashed_password)
        except (UnknownHashError, ValueError):
            logger.warning("Stored password hash has an unrecognised format")
            return False

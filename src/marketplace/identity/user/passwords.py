"""Password hashing and strength rules."""

import re

import bcrypt
from protean.exceptions import ValidationError

# At least one lowercase and one uppercase letter, 8 characters minimum
_STRONG_PASSWORD = re.compile(r"^(?=.*[a-z])(?=.*[A-Z]).{8,}$")

# bcrypt only looks at the first 72 bytes of its input
_BCRYPT_MAX_BYTES = 72


def validate_password_strength(password: str, field: str = "password") -> None:
    if not password or not _STRONG_PASSWORD.match(password):
        raise ValidationError(
            {field: ["Password must be 8 or more characters and include uppercase and lowercase"]}
        )
    if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
        raise ValidationError({field: [f"Password must be at most {_BCRYPT_MAX_BYTES} bytes"]})


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long candidate
        return False

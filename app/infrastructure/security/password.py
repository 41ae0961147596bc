"""Password hashing (bcrypt with SHA-256 pre-hash) and strength rules.

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long passwords are not silently truncated.
"""

import base64
import hashlib

import bcrypt

MIN_PASSWORD_LENGTH = 6


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(
            bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


def password_problems(password: str) -> list[str]:
    """Return the unmet strength rules for password (empty when acceptable).

    Rules: at least 6 characters with a digit, a lowercase and an uppercase
    letter. Non-alphanumeric characters are allowed but not required.
    """
    problems: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"Passwords must be at least {MIN_PASSWORD_LENGTH} characters.")
    if not any(c.isdigit() for c in password):
        problems.append("Passwords must have at least one digit ('0'-'9').")
    if not any(c.islower() for c in password):
        problems.append("Passwords must have at least one lowercase ('a'-'z').")
    if not any(c.isupper() for c in password):
        problems.append("Passwords must have at least one uppercase ('A'-'Z').")
    return problems

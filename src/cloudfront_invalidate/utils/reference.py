"""Caller reference tokens."""
import secrets
import string

__all__ = ["ALPHABET", "generate_reference"]

ALPHABET = string.ascii_letters + string.digits


def generate_reference(length: int = 16) -> str:
    """Generate a random alphanumeric caller reference."""
    return "".join(secrets.choice(ALPHABET) for _ in range(length))

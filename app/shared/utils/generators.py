"""Identifier generators for accounts and request correlation."""

from cuid2 import cuid_wrapper

_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant identifier (CUID2) for account rows."""
    value = _cuid()
    if not isinstance(value, str):
        raise TypeError(f"Expected str from cuid generator, got {type(value).__name__}")
    return value


def generate_correlation_id() -> str:
    """Return a correlation id for a request that arrived without one."""
    return generate_cuid()

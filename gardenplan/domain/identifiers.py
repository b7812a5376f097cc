"""Identifiers for locally created records."""

from uuid6 import uuid7


def generate_placement_id() -> str:
    """Return a new placement id.

    uuid7 combines a millisecond timestamp with random bits, so ids are
    unique without coordination. Callers must not rely on their ordering.
    """
    return f"placement_{uuid7()}"


def generate_prefixed_id(prefix: str) -> str:
    """Return a new record id such as ``grdn_<uuid7>``."""
    return f"{prefix}_{uuid7()}"


def is_id_with_prefix(prefix: str, value: str) -> bool:
    """Check that ``value`` looks like an id built by generate_prefixed_id."""
    if not isinstance(value, str):
        return False
    head, sep, tail = value.partition("_")
    return head == prefix and sep == "_" and len(tail) > 0

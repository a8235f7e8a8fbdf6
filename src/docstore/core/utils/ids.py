"""Unique identifier generation for stored documents"""

from uuid import uuid4


def new_id(fmt: str = "uuid") -> str:
    """Return a new random identifier: canonical UUID4 ('uuid') or 32-char hex ('hex')."""
    value = uuid4()
    if fmt == "uuid":
        return str(value)
    if fmt == "hex":
        return value.hex
    raise ValueError(f"Unknown id format: {fmt!r}")

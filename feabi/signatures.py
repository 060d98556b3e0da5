"""Event topics and function selectors derived from signatures."""

from __future__ import annotations

from collections.abc import Iterable

from Crypto.Hash import keccak

_DIGEST_BYTES = 32


def keccak_partial(data: bytes, size: int) -> str:
    """Return the first ``size`` bytes of the keccak256 digest as ``0x`` hex."""
    if not 0 <= size <= _DIGEST_BYTES:
        raise ValueError(f"size must be between 0 and {_DIGEST_BYTES}, got {size}")
    digest = keccak.new(digest_bits=256, data=bytes(data)).digest()
    return "0x" + digest[:size].hex()


def _sign(name: str, params: Iterable[str], size: int) -> str:
    signature = f"{name}({','.join(params)})"
    return keccak_partial(signature.encode("utf-8"), size)


def event_topic(name: str, fields: Iterable[str]) -> str:
    """Return the 32 byte keccak256 topic of an event signature."""
    return _sign(name, fields, 32)


def func_selector(name: str, params: Iterable[str]) -> str:
    """Return the 4 byte keccak256 selector of a function signature."""
    return _sign(name, params, 4)
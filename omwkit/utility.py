"""Well-defined bit shifts for fixed-width integers and small general helpers."""

from __future__ import annotations

_SUPPORTED_WIDTHS = frozenset({8, 16, 32, 64})


def _check(n: int, bits: int) -> None:
    if bits not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported integer width: {bits} (expected 8, 16, 32 or 64)")
    if n < 0:
        raise ValueError(f"shift count must not be negative: {n}")


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to a ``bits`` wide integer, two's complement if signed."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def shift_left(value: int, n: int, bits: int = 32, signed: bool = True) -> int:
    """Shift ``value`` left by ``n`` bits within a ``bits`` wide integer.

    Bits shifted out are lost. Shifting by ``bits`` or more yields 0.
    """
    _check(n, bits)
    if n >= bits:
        return 0
    return _wrap(_wrap(value, bits, False) << n, bits, signed)


def shift_right(value: int, n: int, bits: int = 32, signed: bool = True) -> int:
    """Shift ``value`` right by ``n`` bits within a ``bits`` wide integer.

    Signed values are shifted arithmetically, so negative values stay
    negative; shifting by ``bits`` or more yields -1 for negative and 0
    for non-negative values. Unsigned values are shifted logically.
    """
    _check(n, bits)
    value = _wrap(value, bits, signed)
    if not signed and n >= bits:
        return 0
    return value >> n


def toggle(value: bool | int) -> bool | int:
    """Return the toggled value: negated for bools, 0 or 1 for ints."""
    if isinstance(value, bool):
        return not value
    return 0 if value else 1
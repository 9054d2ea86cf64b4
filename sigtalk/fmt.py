"""A small printf: %c %d %i %u %s %p %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_CONVERSIONS = frozenset("cdipusxX%")


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _to_base(value: int, digits: str) -> str:
    base = len(digits)
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, base)
        out.append(digits[rest])
    return "".join(reversed(out))


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return value


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return chr(_wrap_unsigned(_as_int(value, conversion), 8))
    if conversion in "di":
        return str(_wrap_signed(_as_int(value, conversion), 32))
    if conversion == "u":
        return str(_wrap_unsigned(_as_int(value, conversion), 32))
    if conversion == "x":
        return _to_base(_wrap_unsigned(_as_int(value, conversion), 32), _HEX_LOWER)
    if conversion == "X":
        return _to_base(_wrap_unsigned(_as_int(value, conversion), 32), _HEX_UPPER)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        if value is None:
            return "(nil)"
        if isinstance(value, int) and not isinstance(value, bool):
            address = _wrap_unsigned(value, 64)
        else:
            address = id(value)
        if address == 0:
            return "(nil)"
        return "0x" + _to_base(address, _HEX_LOWER)
    raise ValueError(f"unknown conversion %{conversion}")


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with a lone '%'")
        if conversion not in _CONVERSIONS:
            raise ValueError(f"unknown conversion %{conversion}")
        if conversion == "%":
            yield "%"
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{conversion}") from None
        yield _convert(conversion, value)


def format_message(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled in from ``args``.

    Raises ValueError for an unknown conversion, a trailing '%', or too few
    arguments. Extra arguments are ignored.
    """
    if template is None:
        raise ValueError("template must not be None")
    return "".join(_pieces(template, args))


def printf(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written. Nothing is written when the
    template is invalid.
    """
    text = format_message(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)
"""Bit-level framing: bytes go out most significant bit first and a message ends with a zero byte."""

from __future__ import annotations

BITS_PER_BYTE = 8


def _message_bytes(text: str | bytes) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if b"\0" in data:
        raise ValueError("message must not contain a NUL character")
    return data


def byte_bits(value: int) -> list[int]:
    """Return the eight bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE))]


def encode_message(text: str | bytes) -> list[int]:
    """Return the bits of ``text`` as UTF-8, followed by a terminating zero byte."""
    data = _message_bytes(text) + b"\0"
    return [bit for value in data for bit in byte_bits(value)]


class BitDecoder:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """The bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the whole message once its terminator is complete."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        if value:
            self._buffer.append(value)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Drop any partial byte and any unfinished message."""
        self._value = 0
        self._count = 0
        self._buffer.clear()
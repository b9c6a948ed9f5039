"""Lenient base64 decoding as found in MIME bodies and headers."""

from __future__ import annotations

from collections.abc import Iterable

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALUES = {byte: value for value, byte in enumerate(_ALPHABET)}
_WHITESPACE = frozenset(b" \t\r\n")
_PAD = ord("=")


class Base64Error(ValueError):
    """Raised when base64 input holds a byte that cannot be decoded."""


class _Quantum:
    """Accumulates sextets and flushes them into an output buffer."""

    __slots__ = ("acc", "count", "out")

    def __init__(self) -> None:
        self.acc = 0
        self.count = 0
        self.out = bytearray()

    def push(self, value: int) -> None:
        self.acc |= value << (18 - 6 * self.count)
        self.count += 1
        if self.count == 4:
            self.out += self.acc.to_bytes(3, "big")
            self.acc = 0
            self.count = 0

    def pad(self) -> bool:
        """Flush a partial quantum on '='; False if the padding is misplaced."""
        if self.count in (1, 2):
            self.out.append((self.acc >> 16) & 0xFF)
        elif self.count == 3:
            self.out += (self.acc >> 8).to_bytes(2, "big")
        elif self.count != 0:
            return False
        self.acc = 0
        self.count = 0
        return True


def base64_decode_stream(stream: Iterable[int], stop_char: int | None = None) -> bytes:
    """Decode base64 from an iterable of byte values.

    Whitespace is skipped, an incomplete final quantum without padding is
    dropped, and decoding ends early (successfully) at ``stop_char``.
    """
    quantum = _Quantum()
    for ch in stream:
        value = _VALUES.get(ch)
        if value is not None:
            quantum.push(value)
        elif ch == _PAD:
            if not quantum.pad():
                raise Base64Error("misplaced base64 padding")
        elif ch in _WHITESPACE:
            continue
        elif ch == stop_char:
            break
        else:
            raise Base64Error(f"invalid base64 byte 0x{ch:02x}")
    return bytes(quantum.out)


def base64_decode(data: bytes) -> bytes:
    """Decode a base64 byte string, ignoring whitespace."""
    return base64_decode_stream(data, 0xFF)
"""Percent-encoded (``%XX``) byte decoding."""

from __future__ import annotations

from enum import Enum, auto

_HEX_DIGITS = {byte: int(chr(byte), 16) for byte in b"0123456789abcdefABCDEF"}
_PERCENT = ord("%")


class HexDecodeError(ValueError):
    """Raised on a malformed percent escape; ``partial`` holds what was decoded."""

    def __init__(self, message: str, partial: bytes) -> None:
        super().__init__(message)
        self.partial = partial


class _State(Enum):
    PLAIN = auto()
    PERCENT = auto()
    HIGH_NIBBLE = auto()


def decode_hex(src: bytes) -> bytes:
    """Decode ``%XX`` escapes, passing other bytes through.

    An escape cut short at the end of the input is silently dropped.
    """
    state = _State.PLAIN
    high = 0
    out = bytearray()

    for ch in src:
        if ch == _PERCENT:
            if state is not _State.PLAIN:
                raise HexDecodeError("unexpected '%' inside escape", bytes(out))
            state = _State.PERCENT
        elif state is _State.PLAIN:
            out.append(ch)
        elif state is _State.PERCENT:
            digit = _HEX_DIGITS.get(ch)
            if digit is None:
                raise HexDecodeError(f"invalid hex digit 0x{ch:02x}", bytes(out))
            high = digit
            state = _State.HIGH_NIBBLE
        else:
            digit = _HEX_DIGITS.get(ch)
            if digit is None:
                raise HexDecodeError(f"invalid hex digit 0x{ch:02x}", bytes(out))
            out.append((high << 4) | digit)
            state = _State.PLAIN

    return bytes(out)
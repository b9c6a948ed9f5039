"""Decoders for the UTF family: UTF-7, UTF-16 (with and without BOM) and UTF-8."""

from __future__ import annotations

import struct
from collections.abc import Iterable

from .base64 import _VALUES, _Quantum

REPLACEMENT_CHARACTER = "\ufffd"
_PLUS = ord("+")


def _decode_units(units: Iterable[int]) -> str:
    """Turn UTF-16 code units into text, replacing unpaired surrogates."""
    chars: list[str] = []
    high: int | None = None
    for unit in units:
        if high is not None:
            if 0xDC00 <= unit <= 0xDFFF:
                chars.append(chr(0x10000 + ((high - 0xD800) << 10) + (unit - 0xDC00)))
                high = None
                continue
            chars.append(REPLACEMENT_CHARACTER)
            high = None
        if 0xD800 <= unit <= 0xDBFF:
            high = unit
        elif 0xDC00 <= unit <= 0xDFFF:
            chars.append(REPLACEMENT_CHARACTER)
        else:
            chars.append(chr(unit))
    if high is not None:
        chars.append(REPLACEMENT_CHARACTER)
    return "".join(chars)


def _units(data: bytes, big_endian: bool) -> Iterable[int]:
    even = len(data) & ~1
    fmt = ">H" if big_endian else "<H"
    return (unit for (unit,) in struct.iter_unpack(fmt, data[:even]))


def decoder_utf7(data: bytes) -> str:
    """Decode UTF-7 text.

    The byte that closes a base64 run is consumed, ``+-`` style runs with no
    data yield the two characters literally, and a run left open at the end
    of the input is dropped.
    """
    out: list[str] = []
    quantum: _Quantum | None = None

    for byte in data:
        if quantum is None:
            if byte == _PLUS:
                quantum = _Quantum()
            else:
                out.append(chr(byte))
            continue

        value = _VALUES.get(byte)
        if value is not None:
            quantum.push(value)
            continue

        quantum.pad()
        raw = bytes(quantum.out)
        if len(raw) >= 2:
            out.append(_decode_units(_units(raw, big_endian=True)))
        elif raw:
            out.append(REPLACEMENT_CHARACTER)
        else:
            out.append("+" + chr(byte))
        quantum = None

    return "".join(out)


def decoder_utf16_le(data: bytes) -> str:
    """Decode little-endian UTF-16; a trailing odd byte is ignored."""
    return _decode_units(_units(data, big_endian=False))


def decoder_utf16_be(data: bytes) -> str:
    """Decode big-endian UTF-16; a trailing odd byte is ignored."""
    return _decode_units(_units(data, big_endian=True))


def decoder_utf16(data: bytes) -> str:
    """Decode UTF-16 using its byte order mark, little-endian if there is none."""
    if data[:2] == b"\xfe\xff":
        return decoder_utf16_be(data[2:])
    if data[:2] == b"\xff\xfe":
        return decoder_utf16_le(data[2:])
    return decoder_utf16_le(data)


def decoder_utf8(data: bytes) -> str:
    """Decode UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")
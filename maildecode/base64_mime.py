"""Base64 decoding over a message stream: MIME bodies and RFC 2047 words."""

from __future__ import annotations

from .base64 import _VALUES, Base64Error, _Quantum
from .stream import MessageStream

_PAD = ord("=")
_NEWLINE = ord("\n")
_CR = ord("\r")
_DASH = ord("-")
_QUESTION = ord("?")
_INLINE_SPACE = frozenset(b" \t\r")


def decode_base64_mime(stream: MessageStream, boundary: bytes) -> tuple[int, bytes]:
    """Decode a base64 MIME body up to ``--boundary``.

    Returns the offset where the body ends (before the line break preceding
    the boundary, when there is one) and the decoded bytes. With an empty
    boundary the whole remaining stream is decoded and the end offset is the
    end of the stream. On malformed input, or when the boundary is never
    reached, the stream is rewound to where decoding started and
    :class:`Base64Error` is raised.
    """
    quantum = _Quantum()
    last_ch = _NEWLINE
    before_last_ch = 0
    end_pos = stream.offset()

    stream.checkpoint()

    while (ch := stream.next_byte()) is not None:
        value = _VALUES.get(ch)
        if value is not None:
            quantum.push(value)
        elif ch == _PAD:
            if not quantum.pad():
                stream.restore()
                raise Base64Error("misplaced base64 padding")
        elif ch == _NEWLINE:
            end_pos = stream.offset() - (2 if last_ch == _CR else 1)
        elif ch in _INLINE_SPACE:
            pass
        elif ch == _DASH:
            if last_ch == _DASH:
                if boundary and stream.try_skip(boundary):
                    if before_last_ch == _NEWLINE:
                        return end_pos, bytes(quantum.out)
                    return stream.offset() - len(boundary) - 2, bytes(quantum.out)
                stream.restore()
                raise Base64Error("unexpected '--' in base64 body")
        else:
            stream.restore()
            raise Base64Error(f"invalid base64 byte 0x{ch:02x}")

        before_last_ch = last_ch
        last_ch = ch

    if not boundary:
        return stream.offset(), bytes(quantum.out)

    stream.restore()
    raise Base64Error("boundary not found")


def decode_base64_word(stream: MessageStream) -> bytes:
    """Decode the text of a "B" encoded word up to its closing ``?=``.

    Folded lines are allowed when the continuation starts with a space or
    tab. Raises :class:`Base64Error` if the word is malformed or unterminated.
    """
    quantum = _Quantum()

    while (ch := stream.next_byte()) is not None:
        if ch == _PAD:
            if not quantum.pad():
                break
        elif ch == _QUESTION:
            if stream.next_byte() == _PAD:
                return bytes(quantum.out)
            break
        elif ch == _NEWLINE:
            if not stream.next_is_space():
                break
        elif ch in _INLINE_SPACE:
            pass
        else:
            value = _VALUES.get(ch)
            if value is None:
                break
            quantum.push(value)

    raise Base64Error("malformed base64 encoded word")
"""A byte cursor over a raw message, used by the streaming decoders."""

from __future__ import annotations

from collections.abc import Iterator


class MessageStream:
    """Forward-only reader over a bytes buffer with a single saved position."""

    __slots__ = ("_data", "_pos", "_saved")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._saved = 0

    def __iter__(self) -> Iterator[int]:
        while (byte := self.next_byte()) is not None:
            yield byte

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        """The whole underlying buffer."""
        return self._data

    def next_byte(self) -> int | None:
        """Consume and return the next byte, or None at the end."""
        if self._pos < len(self._data):
            byte = self._data[self._pos]
            self._pos += 1
            return byte
        return None

    def peek(self) -> int | None:
        """Return the next byte without consuming it, or None at the end."""
        if self._pos < len(self._data):
            return self._data[self._pos]
        return None

    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._pos

    def checkpoint(self) -> None:
        """Remember the current position."""
        self._saved = self._pos

    def restore(self) -> None:
        """Go back to the position saved by the last checkpoint."""
        self._pos = self._saved

    def try_skip(self, prefix: bytes) -> bool:
        """Consume ``prefix`` if the unread data starts with it."""
        if self._data.startswith(prefix, self._pos):
            self._pos += len(prefix)
            return True
        return False

    def next_is_space(self) -> bool:
        """Consume the next byte if it is a space or tab and report whether it was."""
        if self.peek() in (0x20, 0x09):
            self._pos += 1
            return True
        return False

    def slice(self, start: int, end: int) -> bytes:
        """Return the bytes between two absolute offsets."""
        return self._data[start:end]
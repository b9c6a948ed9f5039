import pytest

from maildecode.stream import MessageStream

DATA = b"From: someone@example.com\r\n\tcontinued"


def test_next_byte_walks_whole_buffer():
    stream = MessageStream(DATA)
    collected = []
    while (byte := stream.next_byte()) is not None:
        collected.append(byte)
    assert bytes(collected) == DATA
    assert stream.next_byte() is None
    assert stream.remaining() == 0


def test_iteration_matches_data():
    assert list(MessageStream(DATA)) == list(DATA)


def test_offset_and_remaining_track_consumption():
    stream = MessageStream(DATA)
    for consumed in range(1, 6):
        stream.next_byte()
        assert stream.offset() == consumed
        assert stream.offset() + stream.remaining() == len(DATA)


def test_peek_does_not_consume():
    stream = MessageStream(DATA)
    assert stream.peek() == DATA[0]
    assert stream.peek() == DATA[0]
    assert stream.offset() == 0
    assert stream.next_byte() == DATA[0]
    assert stream.peek() == DATA[1]


def test_peek_at_end_is_none():
    stream = MessageStream(b"")
    assert stream.peek() is None
    assert stream.next_byte() is None


def test_checkpoint_and_restore():
    stream = MessageStream(DATA)
    stream.next_byte()
    stream.next_byte()
    stream.checkpoint()
    saved = stream.offset()
    for _ in range(7):
        stream.next_byte()
    assert stream.offset() == saved + 7
    stream.restore()
    assert stream.offset() == saved
    assert stream.next_byte() == DATA[saved]


def test_try_skip_matching_prefix():
    stream = MessageStream(DATA)
    assert stream.try_skip(b"From:")
    assert stream.offset() == len(b"From:")
    assert stream.next_byte() == DATA[len(b"From:")]


def test_try_skip_mismatch_keeps_position():
    stream = MessageStream(DATA)
    stream.next_byte()
    assert not stream.try_skip(b"From:")
    assert stream.offset() == 1


def test_try_skip_prefix_longer_than_data():
    stream = MessageStream(b"ab")
    assert not stream.try_skip(b"abc")
    assert stream.offset() == 0


@pytest.mark.parametrize("blank", [b" ", b"\t"])
def test_next_is_space_consumes_blank(blank):
    stream = MessageStream(blank + b"x")
    assert stream.next_is_space()
    assert stream.offset() == 1
    assert stream.next_byte() == ord("x")


def test_next_is_space_leaves_other_bytes():
    stream = MessageStream(b"x ")
    assert not stream.next_is_space()
    assert stream.offset() == 0


def test_slice_matches_buffer():
    stream = MessageStream(DATA)
    assert stream.slice(0, 4) == DATA[0:4]
    assert stream.slice(6, len(DATA)) == DATA[6:]
    assert stream.data == DATA
    assert len(stream) == len(DATA)
import pytest

from maildecode.multi_byte import (
    decoder_big5,
    decoder_euc_jp,
    decoder_euc_kr,
    decoder_gb18030,
    decoder_gbk,
    decoder_ibm866,
    decoder_iso2022_jp,
    decoder_shift_jis,
    decoder_windows874,
)

ASCII = b"Hello, World 123"
ASCII_TEXT = "Hello, World 123"


@pytest.mark.parametrize(
    "decoder, data, expected",
    [
        (
            decoder_shift_jis,
            b"\x83n\x83\x8D\x81[\x81E\x83\x8F\x81[\x83\x8B\x83h",
            "ハロー・ワールド",
        ),
        (decoder_big5, b"\xa7A\xa6n\xa1A\xa5@\xac\xc9", "你好，世界"),
        (
            decoder_euc_jp,
            b"\xa5\xcf\xa5\xed\xa1\xbc\xa1\xa6\xa5\xef\xa1\xbc\xa5\xeb\xa5\xc9",
            "ハロー・ワールド",
        ),
        (
            decoder_euc_kr,
            b"\xbe\xc8\xb3\xe7\xc7\xcf\xbc\xbc\xbf\xe4 \xbc\xbc\xb0\xe8",
            "안녕하세요 세계",
        ),
        (
            decoder_iso2022_jp,
            b"\x1b$B%O%m!<!&%o!<%k%I\x1b(B",
            "ハロー・ワールド",
        ),
        (decoder_gbk, b"\xc4\xe3\xba\xc3\xa3\xac\xca\xc0\xbd\xe7", "你好，世界"),
        (decoder_gb18030, b"\xc4\xe3\xba\xc3\xa3\xac\xca\xc0\xbd\xe7", "你好，世界"),
    ],
)
def test_known_encodings(decoder, data, expected):
    assert decoder(data) == expected


def test_ascii_passes_through():
    assert decoder_shift_jis(ASCII) == ASCII_TEXT
    assert decoder_big5(ASCII) == ASCII_TEXT
    assert decoder_euc_jp(ASCII) == ASCII_TEXT
    assert decoder_euc_kr(ASCII) == ASCII_TEXT
    assert decoder_gb18030(ASCII) == ASCII_TEXT
    assert decoder_gbk(ASCII) == ASCII_TEXT
    assert decoder_iso2022_jp(ASCII) == ASCII_TEXT
    assert decoder_windows874(ASCII) == ASCII_TEXT
    assert decoder_ibm866(ASCII) == ASCII_TEXT


def test_empty_input():
    assert decoder_shift_jis(b"") == ""
    assert decoder_big5(b"") == ""
    assert decoder_euc_jp(b"") == ""
    assert decoder_euc_kr(b"") == ""
    assert decoder_gb18030(b"") == ""
    assert decoder_gbk(b"") == ""
    assert decoder_iso2022_jp(b"") == ""
    assert decoder_windows874(b"") == ""
    assert decoder_ibm866(b"") == ""


def test_ibm866_round_trip():
    text = "Привет, мир"
    assert decoder_ibm866(text.encode("cp866")) == text


def test_windows874_round_trip():
    text = "รหัสสำหรับอักขระไทย"
    assert decoder_windows874(text.encode("cp874")) == text


def test_gb18030_round_trip_four_byte_sequence():
    text = "ℌ 你好 €"
    assert decoder_gb18030(text.encode("gb18030")) == text


@pytest.mark.parametrize(
    "decoder",
    [decoder_shift_jis, decoder_euc_jp, decoder_euc_kr, decoder_gbk, decoder_big5],
)
def test_truncated_sequence_is_replaced(decoder):
    result = decoder(b"ab\x83")
    assert result.startswith("ab")
    assert "\ufffd" in result
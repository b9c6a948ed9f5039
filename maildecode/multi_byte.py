"""Decoders for multi-byte and legacy code page character sets."""

from __future__ import annotations


def _decode(data: bytes, codec: str) -> str:
    return data.decode(codec, errors="replace")


def decoder_shift_jis(data: bytes) -> str:
    """Decode Shift_JIS (with the Windows extensions)."""
    return _decode(data, "cp932")


def decoder_big5(data: bytes) -> str:
    """Decode Big5 (with HKSCS extensions)."""
    return _decode(data, "big5hkscs")


def decoder_euc_jp(data: bytes) -> str:
    """Decode EUC-JP."""
    return _decode(data, "euc_jp")


def decoder_euc_kr(data: bytes) -> str:
    """Decode EUC-KR (with the Windows extensions)."""
    return _decode(data, "cp949")


def decoder_gb18030(data: bytes) -> str:
    """Decode GB18030."""
    return _decode(data, "gb18030")


def decoder_gbk(data: bytes) -> str:
    """Decode GBK, read as its GB18030 superset."""
    return _decode(data, "gb18030")


def decoder_iso2022_jp(data: bytes) -> str:
    """Decode ISO-2022-JP."""
    return _decode(data, "iso2022_jp")


def decoder_windows874(data: bytes) -> str:
    """Decode Windows-874 (Thai)."""
    return _decode(data, "cp874")


def decoder_ibm866(data: bytes) -> str:
    """Decode IBM866 (DOS Cyrillic)."""
    return _decode(data, "cp866")
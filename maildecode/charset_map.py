"""Lookup of a text decoder by MIME charset name."""

from __future__ import annotations

from collections.abc import Callable

from .multi_byte import (
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
from .utf import decoder_utf7, decoder_utf16, decoder_utf16_be, decoder_utf16_le

Decoder = Callable[[bytes], str]

_MIN_NAME_LEN = 2
_MAX_NAME_LEN = 45


def no_op(data: bytes) -> str:
    """Decoder that discards its input."""
    return ""


def _single_byte(codec: str, fixups: dict[int, int] | None = None) -> Decoder:
    table = fixups or {}

    def decode(data: bytes) -> str:
        text = data.decode(codec, errors="replace")
        return text.translate(table) if table else text

    decode.__name__ = f"decoder_{codec}"
    decode.__doc__ = f"Decode {codec} text, replacing undefined bytes."
    return decode


_iso_8859_1 = _single_byte("latin_1")
_iso_8859_2 = _single_byte("iso8859_2")
_iso_8859_3 = _single_byte("iso8859_3")
_iso_8859_4 = _single_byte("iso8859_4")
_iso_8859_5 = _single_byte("iso8859_5")
_iso_8859_6 = _single_byte("iso8859_6")
_iso_8859_7 = _single_byte("iso8859_7")
_iso_8859_8 = _single_byte("iso8859_8")
_iso_8859_9 = _single_byte("iso8859_9")
_iso_8859_10 = _single_byte("iso8859_10")
_iso_8859_13 = _single_byte("iso8859_13")
_iso_8859_14 = _single_byte("iso8859_14")
_iso_8859_15 = _single_byte("iso8859_15")
_iso_8859_16 = _single_byte("iso8859_16")
_cp1250 = _single_byte("cp1250")
_cp1251 = _single_byte("cp1251")
_cp1252 = _single_byte("cp1252")
_cp1253 = _single_byte("cp1253")
_cp1254 = _single_byte("cp1254")
_cp1255 = _single_byte("cp1255")
_cp1256 = _single_byte("cp1256")
_cp1257 = _single_byte("cp1257")
_cp1258 = _single_byte("cp1258")
_koi8_r = _single_byte("koi8_r")
_koi8_u = _single_byte("koi8_u")
_ibm850 = _single_byte("cp850")
_tis_620 = _single_byte("tis_620")
# The classic Mac table used here predates the euro sign and the Apple logo.
_macintosh = _single_byte(
    "mac_roman",
    {0x20AC: 0xA4, 0xF8FF: 0xE01E, 0x02C6: 0xFFFD, 0x02DC: 0xFFFD},
)

_DECODERS: dict[bytes, Decoder] = {
    # ISO-8859-1
    b"l1": _iso_8859_1,
    b"latin1": _iso_8859_1,
    b"ibm819": _iso_8859_1,
    b"cp819": _iso_8859_1,
    b"iso-8859-1": _iso_8859_1,
    b"iso_8859-1": _iso_8859_1,
    b"iso_8859-1:1987": _iso_8859_1,
    b"iso-ir-100": _iso_8859_1,
    b"csisolatin1": _iso_8859_1,
    # ISO-8859-2
    b"l2": _iso_8859_2,
    b"latin2": _iso_8859_2,
    b"iso-8859-2": _iso_8859_2,
    b"iso_8859-2": _iso_8859_2,
    b"iso_8859-2:1987": _iso_8859_2,
    b"iso-ir-101": _iso_8859_2,
    b"csisolatin2": _iso_8859_2,
    # ISO-8859-3
    b"l3": _iso_8859_3,
    b"latin3": _iso_8859_3,
    b"iso-8859-3": _iso_8859_3,
    b"iso_8859-3": _iso_8859_3,
    b"iso_8859-3:1988": _iso_8859_3,
    b"iso-ir-109": _iso_8859_3,
    b"csisolatin3": _iso_8859_3,
    # ISO-8859-4
    b"l4": _iso_8859_4,
    b"latin4": _iso_8859_4,
    b"iso-8859-4": _iso_8859_4,
    b"iso_8859-4": _iso_8859_4,
    b"iso_8859-4:1988": _iso_8859_4,
    b"iso-ir-110": _iso_8859_4,
    b"csisolatin4": _iso_8859_4,
    # ISO-8859-5
    b"cyrillic": _iso_8859_5,
    b"iso-8859-5": _iso_8859_5,
    b"iso_8859-5": _iso_8859_5,
    b"iso_8859-5:1988": _iso_8859_5,
    b"iso-ir-144": _iso_8859_5,
    b"csisolatincyrillic": _iso_8859_5,
    # ISO-8859-6
    b"arabic": _iso_8859_6,
    b"asmo-708": _iso_8859_6,
    b"ecma-114": _iso_8859_6,
    b"iso-8859-6": _iso_8859_6,
    b"iso_8859-6": _iso_8859_6,
    b"iso_8859-6:1987": _iso_8859_6,
    b"iso-ir-127": _iso_8859_6,
    b"csisolatinarabic": _iso_8859_6,
    # ISO-8859-7
    b"greek": _iso_8859_7,
    b"greek8": _iso_8859_7,
    b"elot_928": _iso_8859_7,
    b"ecma-118": _iso_8859_7,
    b"iso-8859-7": _iso_8859_7,
    b"iso_8859-7": _iso_8859_7,
    b"iso_8859-7:1987": _iso_8859_7,
    b"iso-ir-126": _iso_8859_7,
    b"csisolatingreek": _iso_8859_7,
    # ISO-8859-8
    b"hebrew": _iso_8859_8,
    b"iso-8859-8": _iso_8859_8,
    b"iso_8859-8": _iso_8859_8,
    b"iso_8859-8:1988": _iso_8859_8,
    b"iso-ir-138": _iso_8859_8,
    b"csisolatinhebrew": _iso_8859_8,
    # ISO-8859-9
    b"l5": _iso_8859_9,
    b"latin5": _iso_8859_9,
    b"iso-8859-9": _iso_8859_9,
    b"iso_8859-9": _iso_8859_9,
    b"iso_8859-9:1989": _iso_8859_9,
    b"iso-ir-148": _iso_8859_9,
    b"csisolatin5": _iso_8859_9,
    # ISO-8859-10
    b"l6": _iso_8859_10,
    b"latin6": _iso_8859_10,
    b"iso-8859-10": _iso_8859_10,
    b"iso_8859-10:1992": _iso_8859_10,
    b"iso-ir-157": _iso_8859_10,
    b"csisolatin6": _iso_8859_10,
    # ISO-8859-13
    b"iso-8859-13": _iso_8859_13,
    b"csiso885913": _iso_8859_13,
    # ISO-8859-14
    b"l8": _iso_8859_14,
    b"latin8": _iso_8859_14,
    b"iso-celtic": _iso_8859_14,
    b"iso-8859-14": _iso_8859_14,
    b"iso_8859-14": _iso_8859_14,
    b"iso_8859-14:1998": _iso_8859_14,
    b"iso-ir-199": _iso_8859_14,
    b"csiso885914": _iso_8859_14,
    # ISO-8859-15
    b"latin-9": _iso_8859_15,
    b"iso-8859-15": _iso_8859_15,
    b"iso_8859-15": _iso_8859_15,
    b"csiso885915": _iso_8859_15,
    # ISO-8859-16
    b"l10": _iso_8859_16,
    b"latin10": _iso_8859_16,
    b"iso-8859-16": _iso_8859_16,
    b"iso_8859-16": _iso_8859_16,
    b"iso_8859-16:2001": _iso_8859_16,
    b"iso-ir-226": _iso_8859_16,
    b"csiso885916": _iso_8859_16,
    # Windows code pages
    b"windows-1250": _cp1250,
    b"cswindows1250": _cp1250,
    b"windows-1251": _cp1251,
    b"cswindows1251": _cp1251,
    b"windows-1252": _cp1252,
    b"cswindows1252": _cp1252,
    b"windows-1253": _cp1253,
    b"cswindows1253": _cp1253,
    b"windows-1254": _cp1254,
    b"cswindows1254": _cp1254,
    b"windows-1255": _cp1255,
    b"cswindows1255": _cp1255,
    b"windows-1256": _cp1256,
    b"cswindows1256": _cp1256,
    b"windows-1257": _cp1257,
    b"cswindows1257": _cp1257,
    b"windows-1258": _cp1258,
    b"cswindows1258": _cp1258,
    b"windows-874": decoder_windows874,
    b"cswindows874": decoder_windows874,
    # KOI8
    b"koi8-r": _koi8_r,
    b"cskoi8r": _koi8_r,
    b"koi8-u": _koi8_u,
    b"cskoi8u": _koi8_u,
    # DOS code pages
    b"850": _ibm850,
    b"cp850": _ibm850,
    b"ibm850": _ibm850,
    b"cspc850multilingual": _ibm850,
    b"866": decoder_ibm866,
    b"cp866": decoder_ibm866,
    b"ibm866": decoder_ibm866,
    b"csibm866": decoder_ibm866,
    # Macintosh
    b"mac": _macintosh,
    b"macintosh": _macintosh,
    b"csmacintosh": _macintosh,
    # Thai
    b"tis-620": _tis_620,
    b"cstis620": _tis_620,
    b"iso-8859-11": _tis_620,
    # Japanese
    b"ms_kanji": decoder_shift_jis,
    b"shift_jis": decoder_shift_jis,
    b"csshiftjis": decoder_shift_jis,
    b"euc-jp": decoder_euc_jp,
    b"cseucpkdfmtjapanese": decoder_euc_jp,
    b"extended_unix_code_packed_format_for_japanese": decoder_euc_jp,
    b"iso-2022-jp": decoder_iso2022_jp,
    b"csiso2022jp": decoder_iso2022_jp,
    # Korean
    b"euc-kr": decoder_euc_kr,
    b"cseuckr": decoder_euc_kr,
    b"ks_c_5601-1987": decoder_euc_kr,
    b"ks_c_5601-1989": decoder_euc_kr,
    # Chinese
    b"big5": decoder_big5,
    b"csbig5": decoder_big5,
    b"gbk": decoder_gbk,
    b"csgbk": decoder_gbk,
    b"cp936": decoder_gbk,
    b"ms936": decoder_gbk,
    b"windows-936": decoder_gbk,
    b"gb2312": decoder_gb18030,
    b"gb18030": decoder_gb18030,
    b"csgb18030": decoder_gb18030,
    # Unicode
    b"utf-7": decoder_utf7,
    b"csutf7": decoder_utf7,
    b"utf-16": decoder_utf16,
    b"csutf16": decoder_utf16,
    b"utf-16be": decoder_utf16_be,
    b"csutf16be": decoder_utf16_be,
    b"utf-16le": decoder_utf16_le,
    b"csutf16le": decoder_utf16_le,
}


def charset_decoder(charset: bytes | str) -> Decoder | None:
    """Return the decoder for a charset name, or None if it is not known.

    Names are matched case-insensitively (ASCII only). UTF-8 and US-ASCII
    aliases are deliberately absent: callers read such text as UTF-8 anyway.
    """
    if isinstance(charset, str):
        charset = charset.encode("utf-8", errors="replace")
    if not _MIN_NAME_LEN <= len(charset) <= _MAX_NAME_LEN:
        return None
    return _DECODERS.get(bytes(charset).lower())
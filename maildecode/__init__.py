"""Lenient decoders for e-mail content: base64 bodies and words, percent escapes and character sets."""

__version__ = "0.1.0"

__all__ = [
    "stream",
    "base64",
    "hex",
    "base64_mime",
    "utf",
    "multi_byte",
    "charset_map",
]
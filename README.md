# maildecode

Lenient decoders for the pieces of an e-mail message: base64 bodies and
"B" encoded words, percent-encoded parameter values, UTF-7 and UTF-16 text,
and a long list of legacy character sets looked up by their MIME names.

The decoders are built for real-world mail. They skip whitespace and line
breaks inside encoded data, drop an incomplete final base64 group, and stop
cleanly at a MIME boundary. Malformed input raises an exception rather than
returning a sentinel.

## Installation

```
pip install maildecode
```

The package has no dependencies outside the standard library.

## Usage

### Base64

```python
from maildecode.base64 import Base64Error, base64_decode

base64_decode(b"VGVzdA==")          # b"Test"
base64_decode(b"w6 HD qcOt")        # "áéí" as UTF-8 bytes

try:
    base64_decode(b"w6HDq!cOtw7PDug=")
except Base64Error:
    ...                             # invalid byte "!"
```

`base64_decode_stream(stream, stop_char=None)` does the same over any
iterable of byte values and ends early, without error, at `stop_char`.
`Base64Error` is a subclass of `ValueError`.

### Streams, MIME bodies and encoded words

`maildecode.stream.MessageStream` is a forward-only cursor over a bytes
buffer, with one saved position (`checkpoint()` / `restore()`), `peek()`,
`next_byte()`, `offset()`, `remaining()`, `try_skip(prefix)` and
`slice(start, end)`.

```python
from maildecode.stream import MessageStream
from maildecode.base64_mime import decode_base64_mime, decode_base64_word

stream = MessageStream(b"VGVzdA==\r\n--boundary\n")
end, body = decode_base64_mime(stream, b"boundary")   # body == b"Test"

word = MessageStream(b"w6HDqcOtw7PDug==?=")
decode_base64_word(word)   # "áéíóú" as UTF-8 bytes
```

`decode_base64_mime` returns the offset where the body ends (before the line
break that precedes the boundary) and the decoded bytes. With an empty
boundary it decodes to the end of the stream. If the data is malformed or the
boundary is never found, the stream is rewound to where decoding started and
`Base64Error` is raised.

`decode_base64_word` reads up to the closing `?=`, allowing folded lines
that continue with a space or tab, and raises `Base64Error` if the word is
malformed or unterminated.

### Percent-encoded values

```python
from maildecode.hex import HexDecodeError, decode_hex

decode_hex(b"this%20is%20some%20text")   # b"this is some text"

try:
    decode_hex(b"abc%zz")
except HexDecodeError as err:
    err.partial                          # b"abc", what was decoded before the error
```

An escape cut short at the very end of the input is dropped silently.

### Character sets

```python
from maildecode.charset_map import charset_decoder

decode = charset_decoder(b"iso-8859-5")
decode(b"\xbf\xe0\xd8\xd2\xd5\xe2, \xdc\xd8\xe0")   # "Привет, мир"

charset_decoder("Windows-1252")     # str names are accepted too
charset_decoder(b"no-such-charset") # None
```

Names are matched case-insensitively and must be 2 to 45 bytes long. They
cover the ISO-8859 variants, Windows code pages 874 and 1250–1258, KOI8-R,
KOI8-U, Macintosh, IBM 850 and 866, TIS-620, UTF-7, UTF-16 (with and without
a byte order mark, and in either byte order) and the common Chinese, Japanese
and Korean encodings, along with their registered aliases. UTF-8 and US-ASCII
names are not in the table: such text is expected to be read as UTF-8
directly. Bytes a character set does not define become U+FFFD.

`no_op` is a decoder that discards its input and returns an empty string.

The UTF and multi-byte decoders can be used on their own:

```python
from maildecode.utf import decoder_utf7, decoder_utf16, decoder_utf8
from maildecode.multi_byte import decoder_shift_jis, decoder_gb18030

decoder_utf7(b"Hi Mom -+Jjo--!")              # "Hi Mom -☺-!"
decoder_utf16(b"\xff\xfe\xe1\x00\xe9\x00")    # "áé"
```

`maildecode.multi_byte` provides `decoder_shift_jis`, `decoder_big5`,
`decoder_euc_jp`, `decoder_euc_kr`, `decoder_gb18030`, `decoder_gbk`,
`decoder_iso2022_jp`, `decoder_windows874` and `decoder_ibm866`.

## What this package does not do

It decodes pieces of a message; it does not parse one. There is no header or
address parser, no MIME structure walker, no quoted-printable decoder, no
decoder that takes a whole `=?charset?B?...?=` word and picks the character
set, and no mailbox (mbox or Maildir) reader. Those are left to the caller,
who can combine `MessageStream`, the base64 decoders and `charset_decoder`.

## Running the tests

```
pip install "maildecode[test]"
pytest
```
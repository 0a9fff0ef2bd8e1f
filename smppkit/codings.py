"""Short message data codings and the codecs behind them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Protocol

from .errors import DecodeNotImplementedError, EncodeNotImplementedError
from .gsm7 import GSM7, get_escape_chars, is_escape_char

_DEFAULT_OCTET_LIMIT = 134
_MIN_OCTET_LIMIT = 64


class DataCoding(IntEnum):
    """Value of the SMPP ``data_coding`` field."""

    GSM7BIT = 0x00
    ASCII = 0x01
    BINARY8BIT1 = 0x02
    LATIN1 = 0x03
    BINARY8BIT2 = 0x04
    CYRILLIC = 0x06
    HEBREW = 0x07
    UCS2 = 0x08


class _Codec(Protocol):
    def encode(self, text: str) -> bytes: ...

    def decode(self, data: bytes) -> str: ...


class Encoding(ABC):
    """A text codec tied to an SMPP data coding value."""

    data_coding: int

    @abstractmethod
    def encode(self, text: str) -> bytes:
        """Encode ``text`` into octets."""

    @abstractmethod
    def decode(self, data: bytes) -> str:
        """Decode octets into text."""


class CustomEncoding(Encoding):
    """Encoding that delegates to a user-supplied codec."""

    def __init__(self, data_coding: int, codec: _Codec) -> None:
        self.data_coding = data_coding
        self._codec = codec

    def encode(self, text: str) -> bytes:
        return self._codec.encode(text)

    def decode(self, data: bytes) -> str:
        return self._codec.decode(data)


def _effective_limit(octet_limit: int) -> int:
    return _DEFAULT_OCTET_LIMIT if octet_limit < _MIN_OCTET_LIMIT else octet_limit


def _chunks(text: str, size: int) -> Iterator[str]:
    for start in range(0, len(text), size):
        yield text[start:start + size]


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


class GSM7BitEncoding(Encoding):
    """GSM 7-bit coding; unpacked (one septet per octet) by default."""

    data_coding = DataCoding.GSM7BIT

    def __init__(self, packed: bool = False) -> None:
        self.packed = packed
        self._codec = GSM7(packed)

    def encode(self, text: str) -> bytes:
        return self._codec.encode(text)

    def decode(self, data: bytes) -> str:
        return self._codec.decode(data)

    def should_split(self, text: str, octet_limit: int) -> bool:
        """Tell whether ``text`` exceeds ``octet_limit`` once encoded."""
        length = _utf8_length(text)
        if self.packed:
            return (length * 7 + 7) // 8 > octet_limit
        return length > octet_limit

    def encode_split(self, text: str, octet_limit: int) -> list[bytes]:
        """Encode ``text`` as segments of at most ``octet_limit`` characters."""
        limit = _effective_limit(octet_limit)
        return [self.encode(chunk) for chunk in _chunks(text, limit)]


def _segment_end(text: str, start: int, stop: int, limit: int) -> int:
    """Find where a segment starting at ``start`` must end.

    Escape characters take two septets and are never split across segments.
    """
    septets = 0
    pos = start
    while septets < limit:
        septets += 2 if is_escape_char(text[pos]) else 1
        pos += 1
        if pos == stop:
            break
    if is_escape_char(text[pos - 1]) and septets > limit:
        pos -= 1
    return pos


def _shift_left_one(data: bytes, include_lsb: bool) -> bytes:
    """Shift a packed stream one bit left to align it after a UDH.

    When ``include_lsb`` is set, the bit shifted out of the last octet is kept
    in an extra octet padded with a carriage return septet.
    """
    size = len(data)
    value = (int.from_bytes(data, "little") << 1) & ((1 << (8 * size)) - 1)
    shifted = value.to_bytes(size, "little")
    if include_lsb:
        shifted += bytes([((data[-1] >> 7) & 0x01) | (0x0D << 1)])
    return shifted


class GSM7BitPackedEncoding(Encoding):
    """GSM 7-bit coding with septets packed into octets."""

    data_coding = DataCoding.GSM7BIT
    _codec = GSM7(packed=True)

    def encode(self, text: str) -> bytes:
        return self._codec.encode(text)

    def decode(self, data: bytes) -> str:
        return self._codec.decode(data)

    def should_split(self, text: str, octet_limit: int) -> bool:
        """Tell whether ``text`` exceeds ``octet_limit`` once packed."""
        escapes = len(get_escape_chars(text))
        regular = len(text) - escapes
        return (regular * 7 + escapes * 2 * 7 + 7) // 8 > octet_limit

    def septet_count(self, text: str) -> int:
        """Number of septets ``text`` occupies, escapes counting twice."""
        escapes = len(get_escape_chars(text))
        return escapes * 2 + (len(text) - escapes)

    def encode_split(self, text: str, octet_limit: int) -> list[bytes]:
        """Encode ``text`` as packed segments shifted to follow a UDH."""
        limit = _effective_limit(octet_limit)
        septet_limit = limit * 8 // 7
        segments: list[bytes] = []
        start = 0
        while start < len(text):
            stop = min(start + septet_limit, len(text))
            end = _segment_end(text, start, stop, septet_limit)
            chunk = text[start:end]
            septets = self.septet_count(chunk)
            include_lsb = septets != septet_limit and septets % 8 == 0
            segments.append(_shift_left_one(self.encode(chunk), include_lsb))
            start = end
        return segments


class ASCIIEncoding(Encoding):
    """Plain byte coding of the text."""

    data_coding = DataCoding.ASCII

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8", "surrogateescape")

    def decode(self, data: bytes) -> str:
        return bytes(data).decode("utf-8", "surrogateescape")


class CharmapEncoding(Encoding):
    """Single-byte character set coding such as ISO 8859."""

    def __init__(self, data_coding: int, codec: str) -> None:
        self.data_coding = data_coding
        self.codec = codec

    def encode(self, text: str) -> bytes:
        return text.encode(self.codec)

    def decode(self, data: bytes) -> str:
        return bytes(data).decode(self.codec, "replace")


class BinaryEncoding(Encoding):
    """Binary data coding, which carries no text."""

    def __init__(self, data_coding: int) -> None:
        self.data_coding = data_coding

    def encode(self, text: str) -> bytes:
        raise EncodeNotImplementedError()

    def decode(self, data: bytes) -> str:
        raise DecodeNotImplementedError()


class UCS2Encoding(Encoding):
    """UCS-2 coding, big endian without byte order mark."""

    data_coding = DataCoding.UCS2

    def encode(self, text: str) -> bytes:
        return text.encode("utf-16-be")

    def decode(self, data: bytes) -> str:
        return bytes(data).decode("utf-16-be", "replace")

    def should_split(self, text: str, octet_limit: int) -> bool:
        """Tell whether ``text`` exceeds ``octet_limit`` once encoded."""
        return len(text) * 2 > octet_limit

    def encode_split(self, text: str, octet_limit: int) -> list[bytes]:
        """Encode ``text`` as segments of whole two-octet characters."""
        limit = _effective_limit(octet_limit)
        return [self.encode(chunk) for chunk in _chunks(text, limit // 2)]


@dataclass(frozen=True)
class UTF16Codec:
    """UTF-16 codec with a chosen byte order, optionally with a byte order mark."""

    big_endian: bool = True
    use_bom: bool = False

    @property
    def _codec(self) -> str:
        return "utf-16-be" if self.big_endian else "utf-16-le"

    def encode(self, text: str) -> bytes:
        body = text.encode(self._codec)
        if self.use_bom:
            return "\ufeff".encode(self._codec) + body
        return body

    def decode(self, data: bytes) -> str:
        data = bytes(data)
        codec = self._codec
        if self.use_bom:
            if data[:2] == b"\xfe\xff":
                codec, data = "utf-16-be", data[2:]
            elif data[:2] == b"\xff\xfe":
                codec, data = "utf-16-le", data[2:]
        return data.decode(codec, "replace")


GSM7BIT = GSM7BitEncoding(packed=False)
GSM7BITPACKED = GSM7BitPackedEncoding()
ASCII = ASCIIEncoding()
BINARY8BIT1 = BinaryEncoding(DataCoding.BINARY8BIT1)
LATIN1 = CharmapEncoding(DataCoding.LATIN1, "iso-8859-1")
BINARY8BIT2 = BinaryEncoding(DataCoding.BINARY8BIT2)
CYRILLIC = CharmapEncoding(DataCoding.CYRILLIC, "iso-8859-5")
HEBREW = CharmapEncoding(DataCoding.HEBREW, "iso-8859-8")
UCS2 = UCS2Encoding()

UTF16BEM = UTF16Codec(big_endian=True, use_bom=True)
UTF16LEM = UTF16Codec(big_endian=False, use_bom=True)
UTF16BE = UTF16Codec(big_endian=True, use_bom=False)
UTF16LE = UTF16Codec(big_endian=False, use_bom=False)

_CODING_MAP: dict[int, Encoding] = {
    DataCoding.GSM7BIT: GSM7BIT,
    DataCoding.ASCII: ASCII,
    DataCoding.BINARY8BIT1: BINARY8BIT1,
    DataCoding.LATIN1: LATIN1,
    DataCoding.BINARY8BIT2: BINARY8BIT2,
    DataCoding.CYRILLIC: CYRILLIC,
    DataCoding.HEBREW: HEBREW,
    DataCoding.UCS2: UCS2,
}


def from_data_coding(code: int) -> Encoding | None:
    """Return the encoding for a data coding value, or None if unknown."""
    return _CODING_MAP.get(code)


def find_encoding(text: str) -> Encoding:
    """Pick GSM 7-bit for ASCII-only text and UCS-2 otherwise."""
    return GSM7BIT if text.isascii() else UCS2
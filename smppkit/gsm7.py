"""GSM 03.38 7-bit default alphabet: validation, packing and text codec."""

from __future__ import annotations

from dataclasses import dataclass

ESCAPE = 0x1B

_BASIC_ALPHABET = (
    "@£$¥èéùìòÇ\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ"
    " !\"#¤%&'()*+,-./"
    "0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmno"
    "pqrstuvwxyzäöñüà"
)

_FORWARD_LOOKUP: dict[str, int] = {
    char: code for code, char in enumerate(_BASIC_ALPHABET) if code != ESCAPE
}
_REVERSE_LOOKUP: dict[int, str] = {code: char for char, code in _FORWARD_LOOKUP.items()}

_FORWARD_ESCAPE: dict[str, int] = {
    "\f": 0x0A,
    "^": 0x14,
    "{": 0x28,
    "}": 0x29,
    "\\": 0x2F,
    "[": 0x3C,
    "~": 0x3D,
    "]": 0x3E,
    "|": 0x40,
    "€": 0x65,
}
_REVERSE_ESCAPE: dict[int, str] = {code: char for char, code in _FORWARD_ESCAPE.items()}


class InvalidCharacterError(ValueError):
    """A character has no representation in the GSM 7-bit alphabet."""

    def __init__(self, char: str = "") -> None:
        super().__init__(f"invalid gsm7 character: {char!r}" if char else "invalid gsm7 character")
        self.char = char


class InvalidByteError(ValueError):
    """A byte lies outside the GSM 7-bit alphabet."""

    def __init__(self, byte: int | None = None) -> None:
        message = "invalid gsm7 byte" if byte is None else f"invalid gsm7 byte: 0x{byte:02x}"
        super().__init__(message)
        self.byte = byte


def validate_gsm7_string(text: str) -> list[str]:
    """Return the characters of ``text`` that GSM 7-bit cannot represent."""
    return [c for c in text if c not in _FORWARD_LOOKUP and c not in _FORWARD_ESCAPE]


def validate_gsm7_buffer(buffer: bytes) -> bytes:
    """Return the bytes of ``buffer`` that fall outside the GSM 7-bit range."""
    invalid = bytearray()
    it = iter(buffer)
    for b in it:
        if b == ESCAPE:
            e = next(it, None)
            if e is None:
                invalid.append(b)
                break
            if e not in _REVERSE_ESCAPE:
                invalid.extend((b, e))
        elif b not in _REVERSE_LOOKUP:
            invalid.append(b)
    return bytes(invalid)


def get_escape_chars(text: str) -> list[str]:
    """Return the characters of ``text`` that need the escape table."""
    return [c for c in text if c in _FORWARD_ESCAPE]


def is_escape_char(char: str) -> bool:
    """Tell whether ``char`` belongs to the escape table."""
    return char in _FORWARD_ESCAPE


def pack(septets: bytes) -> bytes:
    """Pack septets into octets, eight septets to seven octets."""
    out = bytearray()
    for start in range(0, len(septets), 8):
        chunk = septets[start:start + 8]
        count = len(chunk)
        for j in range(min(count, 7)):
            octet = (chunk[j] & 0x7F) >> j
            if j + 1 < count:
                octet |= ((chunk[j + 1] & 0x7F) << (7 - j)) & 0xFF
            out.append(octet)
    return bytes(out)


def unpack(data: bytes) -> bytes:
    """Unpack octets into septets, seven octets to up to eight septets.

    The eighth septet of a full block is kept only when the block's last
    octet is non-zero.
    """
    out = bytearray()
    for start in range(0, len(data), 7):
        chunk = data[start:start + 7]
        for i, octet in enumerate(chunk):
            septet = (octet << i) & 0x7F
            if i:
                septet |= chunk[i - 1] >> (8 - i)
            out.append(septet)
        if len(chunk) == 7 and chunk[6] > 0:
            out.append(chunk[6] >> 1)
    return bytes(out)


@dataclass(frozen=True)
class GSM7:
    """GSM 7-bit codec; ``packed`` selects octet packing of the septets."""

    packed: bool = False

    def encode(self, text: str) -> bytes:
        septets = bytearray()
        for char in text:
            code = _FORWARD_LOOKUP.get(char)
            if code is not None:
                septets.append(code)
                continue
            code = _FORWARD_ESCAPE.get(char)
            if code is None:
                raise InvalidCharacterError(char)
            septets.extend((ESCAPE, code))
        return pack(bytes(septets)) if self.packed else bytes(septets)

    def decode(self, data: bytes) -> str:
        septets = unpack(data) if self.packed else bytes(data)
        chars: list[str] = []
        it = iter(septets)
        for b in it:
            if b == ESCAPE:
                e = next(it, None)
                if e is None or e not in _REVERSE_ESCAPE:
                    raise InvalidByteError(ESCAPE if e is None else e)
                chars.append(_REVERSE_ESCAPE[e])
            else:
                char = _REVERSE_LOOKUP.get(b)
                if char is None:
                    raise InvalidByteError(b)
                chars.append(char)
        return "".join(chars)

    def __str__(self) -> str:
        return "GSM 7-bit (Packed)" if self.packed else "GSM 7-bit (Unpacked)"
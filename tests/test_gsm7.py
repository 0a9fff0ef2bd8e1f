import pytest

from smppkit.gsm7 import (
    GSM7,
    InvalidByteError,
    InvalidCharacterError,
    get_escape_chars,
    is_escape_char,
    pack,
    unpack,
    validate_gsm7_buffer,
    validate_gsm7_string,
)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Curabitur nec nunc "
    "venenatis, ultricies ipsum id, volutpat ante. Sed pretium ac metus a interdum metus."
)
ALPHABET = (
    "@£$¥èéùìòÇØøÅåΔ_ΦΓΛΩΠΨΣΘΞÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

PACKED_CASES = [
    ("", b""),
    ("1", b"\x31"),
    ("12", b"\x31\x19"),
    ("123", b"\x31\xD9\x0C"),
    ("1234", b"\x31\xD9\x8C\x06"),
    ("12345", b"\x31\xD9\x8C\x56\x03"),
    ("123456", b"\x31\xD9\x8C\x56\xB3\x01"),
    ("1234567", b"\x31\xD9\x8C\x56\xB3\xDD\x00"),
    ("12345678", b"\x31\xD9\x8C\x56\xB3\xDD\x70"),
    ("123456789", b"\x31\xD9\x8C\x56\xB3\xDD\x70\x39"),
    (
        LOREM,
        b"\xCC\xB7\xBC\xDC\x06\xA5\xE1\xF3\x7A\x1B\x44\x7E\xB3\xDF\x72\xD0\x3C\x4D\x07\x85"
        b"\xDB\x65\x3A\x0B\x34\x7E\xBB\xE7\xE5\x31\xBD\x4C\xAF\xCB\x41\x61\x72\x1A\x9E\x9E"
        b"\x8F\xD3\xEE\x33\xA8\xCC\x4E\xD3\x5D\xA0\x61\x5D\x1E\x16\xA7\xE9\x75\x39\xC8\x5D"
        b"\x1E\x83\xDC\x75\xF7\x18\x64\x2F\xBB\xCB\xEE\x30\x3D\x3D\x67\x81\xEA\x6C\xBA\x3C"
        b"\x3D\x4E\x97\xE7\xA0\x34\x7C\x5E\x6F\x83\xD2\x64\x16\xC8\xFE\x66\xD7\xE9\xF0\x30"
        b"\x1D\x14\x76\xD3\xCB\x2E\xD0\xB4\x4C\x06\xC1\xE5\x65\x7A\xBA\xDE\x06\x85\xC7\xA0"
        b"\x76\x99\x5E\x9F\x83\xC2\xA0\xB4\x9B\x5E\x96\x93\xEB\x6D\x50\xBB\x4C\xAF\xCF\x5D",
    ),
    ("\n", b"\x0A"),
    ("\r", b"\x0D"),
    ("\f", b"\x1B\x05"),
    (
        "^{}\\[~]|€",
        b"\x1B\xCA\x06\xB5\x49\x6D\x5E\x1B\xDE\xA6\xB7\xF1\x6D\x80\x9B\x32",
    ),
    (
        ALPHABET,
        b"\x80\x80\x60\x40\x28\x18\x0E\x88\xC4\x82\xE1\x78\x40\x22\x92\x09\xA5\x62\xB9\x60"
        b"\x32\x1A\x4E\xC7\xF3\x01\x85\x44\x23\x52\xC9\x74\x42\xA5\x54\x2B\x56\xCB\xF5\x82"
        b"\xC5\x64\x33\x5A\xCD\x76\xC3\xE5\x74\x3B\x5E\xCF\xF7\x03\x06\x85\x43\x62\xD1\x78"
        b"\x44\x26\x95\x4B\x66\xD3\xF9\x84\x46\xA5\x53\x6A\xD5\x7A\xC5\x66\xB5\x5B\x6E\xD7"
        b"\xFB\x05\x87\xC5\x63\x72\xD9\x7C\x46\xA7\xD5\x6B\x76\xDB\xFD\x86\xC7\xE5\x73\x7A"
        b"\xDD\x7E\xC7\xE7\xF5\x7B\x7E\xDF\xFF\x07",
    ),
]

UNPACKED_CASES = [
    ("", b""),
    ("1", b"\x31"),
    ("12", b"\x31\x32"),
    ("123", b"\x31\x32\x33"),
    ("1234", b"\x31\x32\x33\x34"),
    ("12345", b"\x31\x32\x33\x34\x35"),
    ("123456", b"\x31\x32\x33\x34\x35\x36"),
    ("1234567", b"\x31\x32\x33\x34\x35\x36\x37"),
    ("12345678", b"\x31\x32\x33\x34\x35\x36\x37\x38"),
    ("123456789", b"\x31\x32\x33\x34\x35\x36\x37\x38\x39"),
    ("12345[6", b"\x31\x32\x33\x34\x35\x1B\x3C\x36"),
    (LOREM, LOREM.encode("ascii")),
    ("\n", b"\x0A"),
    ("\r", b"\x0D"),
    ("\f", b"\x1B\x0A"),
    (
        "^{}\\[~]|€",
        b"\x1B\x14\x1B\x28\x1B\x29\x1B\x2F\x1B\x3C\x1B\x3D\x1B\x3E\x1B\x40\x1B\x65",
    ),
    (ALPHABET, bytes(b for b in range(0x80) if b not in (0x0A, 0x0D, 0x1B))),
]


@pytest.mark.parametrize(
    "packed, expected",
    [(True, "GSM 7-bit (Packed)"), (False, "GSM 7-bit (Unpacked)")],
)
def test_encoding_string(packed, expected):
    assert str(GSM7(packed)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12345678", []),
        ("12345[6]", []),
        (
            "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ\f^{}\\[~]|€ÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
            "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà",
            [],
        ),
        ("你", ["你"]),
    ],
)
def test_validate_string(text, expected):
    assert validate_gsm7_string(text) == expected


@pytest.mark.parametrize(
    "buffer, expected",
    [
        (bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x36, 0x37, 0x38]), b""),
        (bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x1B, 0x3C, 0x36, 0x1B, 0x3E]), b""),
        (bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x1B]), b"\x1B"),
        (bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x1B, 0x00]), b"\x1B\x00"),
        (bytes([0x80, 0x81, 0x82, 0x83]), b"\x80\x81\x82\x83"),
    ],
)
def test_validate_buffer(buffer, expected):
    assert validate_gsm7_buffer(buffer) == expected


@pytest.mark.parametrize("text, data", PACKED_CASES)
def test_packed_encoder(text, data):
    assert GSM7(True).encode(text) == data


@pytest.mark.parametrize("text, data", UNPACKED_CASES)
def test_unpacked_encoder(text, data):
    assert GSM7(False).encode(text) == data


@pytest.mark.parametrize("text, data", PACKED_CASES)
def test_packed_decoder(text, data):
    assert GSM7(True).decode(data) == text


@pytest.mark.parametrize("text, data", UNPACKED_CASES)
def test_unpacked_decoder(text, data):
    assert GSM7(False).decode(data) == text


@pytest.mark.parametrize("packed", [True, False])
def test_invalid_character(packed):
    with pytest.raises(InvalidCharacterError) as info:
        GSM7(packed).encode("你")
    assert info.value.char == "你"


@pytest.mark.parametrize("data", [b"\x80", b"\x1B", b"\x1B\x80"])
def test_invalid_byte(data):
    with pytest.raises(InvalidByteError):
        GSM7(False).decode(data)


def test_escape_chars():
    assert get_escape_chars("a{b€c") == ["{", "€"]
    assert get_escape_chars("plain") == []
    assert is_escape_char("|")
    assert not is_escape_char("a")


def test_pack_unpack_round_trip():
    septets = bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x36, 0x37, 0x38, 0x39])
    packed = pack(septets)
    assert packed == b"\x31\xD9\x8C\x56\xB3\xDD\x70\x39"
    assert unpack(packed) == septets


def test_unpack_drops_eighth_septet_after_zero_octet():
    assert unpack(b"\x31\xD9\x8C\x56\xB3\xDD\x00") == b"1234567"


def test_default_codec_is_unpacked():
    assert GSM7().encode("12") == b"12"
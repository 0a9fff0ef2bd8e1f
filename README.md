# smppkit

smppkit provides building blocks for SMPP (Short Message Peer-to-Peer) clients. It depends only on the standard library.

- `smppkit.gsm7` handles the GSM 03.38 7-bit alphabet:
  - encoding and decoding, packed or unpacked;
  - septet packing;
  - checks on characters and bytes.
- `smppkit.codings` provides the SMPP `data_coding` encodings:
  - GSM 7-bit, unpacked and packed, ASCII, Latin-1, Cyrillic, Hebrew, UCS2 and binary;
  - UTF-16 codecs;
  - splitting of long messages into segments.
- `smppkit.commands` defines the `CommandId` and `CommandStatus` enums.
- `smppkit.constants` holds protocol limits, flags, optional parameter tags and defaults, including the default TON/NPI.
- `smppkit.errors` defines the exceptions the package raises.

## What it does not do

smppkit does not open connections, bind to an SMSC or manage sessions. It does not build or parse PDUs either. It covers only the data layer that such a client needs.

## Installation

```
pip install smppkit
```

## GSM 7-bit

```python
from smppkit.gsm7 import GSM7, InvalidCharacterError, validate_gsm7_string

packed = GSM7(packed=True)
assert packed.encode("12") == bytes([0x31, 0x19])
assert packed.decode(bytes([0x31, 0x19])) == "12"
assert str(packed) == "GSM 7-bit (Packed)"

assert validate_gsm7_string("hello 你") == ["你"]

try:
    GSM7(packed=False).encode("你")
except InvalidCharacterError:
    ...
```

Characters from the extension table, such as `{ } [ ] ~ | ^ \ €` and form feed, take two septets each: an escape (`0x1B`) and then the code.

Errors work as follows:

- `GSM7.decode` raises `InvalidByteError` for a byte outside the alphabet or for a dangling escape.
- `validate_gsm7_buffer` returns the offending bytes instead of raising.

Other helpers:

- `get_escape_chars` and `is_escape_char` report which characters need the extension table.
- `pack` and `unpack` convert between septets and octets.

## Data codings

```python
from smppkit.codings import DataCoding, find_encoding, from_data_coding

enc = find_encoding("Xin chào")  # UCS2: the text is not plain ASCII
payload = enc.encode("Xin chào")
assert enc.decode(payload) == "Xin chào"

ucs2 = from_data_coding(DataCoding.UCS2)
segments = ucs2.encode_split("a long message ...", 134)
```

The module-level encodings are:

| Name | Data coding |
| --- | --- |
| `GSM7BIT` | 0 (unpacked) |
| `GSM7BITPACKED` | 0 (packed) |
| `ASCII` | 1 |
| `BINARY8BIT1` | 2 |
| `LATIN1` | 3 |
| `BINARY8BIT2` | 4 |
| `CYRILLIC` | 6 |
| `HEBREW` | 7 |
| `UCS2` | 8 |

Lookup and selection:

- `from_data_coding` returns the encoding for a code, or `None` if the code is unknown. Code 0 maps to the unpacked `GSM7BIT`.
- `find_encoding` returns `GSM7BIT` for ASCII-only text and `UCS2` otherwise.

The binary encodings carry no text. Their `encode` and `decode` raise `EncodeNotImplementedError` and `DecodeNotImplementedError`.

### Splitting

`GSM7BitEncoding`, `GSM7BitPackedEncoding` and `UCS2Encoding` offer `should_split(text, octet_limit)` and `encode_split(text, octet_limit)`. `encode_split` replaces an octet limit below 64 with 134, then splits as follows:

| Encoding | How `encode_split` splits |
| --- | --- |
| GSM 7-bit (unpacked) | Each segment holds at most `octet_limit` characters. |
| UCS2 | Each segment holds at most `octet_limit // 2` characters, so a two-octet character is never cut. |
| GSM 7-bit (packed) | Each segment holds at most `octet_limit * 8 // 7` septets, and an escape sequence is never cut. Each segment is shifted one bit left to leave room for the padding bit after a concatenation user data header. When such a segment ends on a full octet, one extra octet is appended, padded with a carriage return. |

### Other codecs

- `UTF16BEM` and `UTF16LEM` are `UTF16Codec` instances that write a byte order mark. On decoding they honour a leading byte order mark.
- `UTF16BE` and `UTF16LE` are `UTF16Codec` instances without one.
- `CustomEncoding(data_coding, codec)` wraps any object that has `encode(text)` and `decode(data)` methods.

## Commands and status codes

```python
from smppkit.commands import CommandId, CommandStatus

assert CommandId.SUBMIT_SM_RESP.is_response()
assert not CommandId.SUBMIT_SM.is_response()
assert CommandId(-2147483644) is CommandId.SUBMIT_SM_RESP  # signed 32-bit form

status = CommandStatus(0x0F)
assert status is CommandStatus.ESME_RINVSYSID
assert status.description == "Invalid System ID"
```

## Default TON / NPI

```python
from smppkit.constants import get_default_npi, get_default_ton, set_default_ton

set_default_ton(1)
assert get_default_ton() == 1
assert get_default_npi() == 0
```

Both values are stored under a lock. A value outside 0–255 raises `ValueError`.

## Errors

- `SmppError` and its subclasses print in the form `Error happened: [<message>]. SerialVersionUID: [<id>]`. The subclasses are:
  - `InvalidPDUError`
  - `UnknownCommandIDError`
  - `WrongDateFormatError`
  - `ShortMessageLengthTooLargeError`
- `UDHTooLongError` and `NotSplitterError` are also defined.

## Running the tests

```
pip install -e ".[test]"
pytest
```
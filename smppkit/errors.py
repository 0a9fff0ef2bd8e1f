"""Errors raised by the SMPP protocol layer."""

from __future__ import annotations

from .constants import SM_MSG_LEN


class SmppError(Exception):
    """SMPP error carrying a description and a serial version identifier."""

    message = "SMPP error"
    serial_version_uid = 0

    def __init__(self, message: str | None = None, serial_version_uid: int | None = None) -> None:
        if message is not None:
            self.message = message
        if serial_version_uid is not None:
            self.serial_version_uid = serial_version_uid
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"Error happened: [{self.message}]. SerialVersionUID: [{self.serial_version_uid}]"


class InvalidPDUError(SmppError):
    """The PDU payload is invalid."""

    message = "PDU payload is invalid"
    serial_version_uid = -6985061862208729984


class UnknownCommandIDError(SmppError):
    """The command id is not known."""

    message = "Unknown command id"
    serial_version_uid = -5091873576710864441


class WrongDateFormatError(SmppError):
    """A date field has the wrong format."""

    message = "Wrong date format"
    serial_version_uid = 5831937612139037591


class ShortMessageLengthTooLargeError(SmppError):
    """The encoded short message is longer than the protocol allows."""

    message = f"Encoded short message data exceeds size of {SM_MSG_LEN}"
    serial_version_uid = 78237205927624


class UDHTooLongError(ValueError):
    """The user data header is longer than the short message data."""

    def __init__(self, message: str = "User Data Header is too long for PDU short message") -> None:
        super().__init__(message)


class NotSplitterError(TypeError):
    """The encoding cannot split text into segments."""

    def __init__(self, message: str = "Encoding not implementing Splitter interface") -> None:
        super().__init__(message)


class DecodeNotImplementedError(NotImplementedError):
    """The encoding does not support decoding."""

    def __init__(self, message: str = "Decode is not implemented in this Encoding") -> None:
        super().__init__(message)


class EncodeNotImplementedError(NotImplementedError):
    """The encoding does not support encoding."""

    def __init__(self, message: str = "Encode is not implemented in this Encoding") -> None:
        super().__init__(message)
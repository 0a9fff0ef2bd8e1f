"""SMPP data codings, GSM 7-bit alphabet, command identifiers, status codes and constants."""

__version__ = "0.1.0"
__all__ = ["codings", "commands", "constants", "errors", "gsm7"]
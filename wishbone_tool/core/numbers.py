"""Numeric literal parsing with C-style base prefixes."""

from __future__ import annotations

from wishbone_tool.core.errors import NumberParseError, ParseFailure

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {ch: i for i, ch in enumerate(_DIGITS)} | {ch.upper(): i for i, ch in enumerate(_DIGITS)}


def detect_base(text: str) -> tuple[str, int]:
    """Split `text` into its digit string and radix.

    A bare "0" is decimal. Any other leading zero means octal and every
    leading zero is stripped, so "00" leaves no digits at all.
    """
    if text.startswith(("0x", "0X")):
        return text[2:], 16
    if text.startswith(("0b", "0B")):
        return text[2:], 2
    if text.startswith("0") and text != "0":
        return text.lstrip("0"), 8
    return text, 10


def _parse_digits(digits: str, base: int, bits: int, literal: str) -> int:
    if not digits:
        raise NumberParseError(digits, ParseFailure.EMPTY, literal=literal)

    body = digits[1:] if digits.startswith("+") else digits
    if not body:
        raise NumberParseError(digits, ParseFailure.INVALID_DIGIT, literal=literal)

    # Scan left to right so the first failing digit decides the reason.
    limit = (1 << bits) - 1
    value = 0
    for ch in body:
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= base:
            raise NumberParseError(digits, ParseFailure.INVALID_DIGIT, literal=literal)
        value = value * base + digit
        if value > limit:
            raise NumberParseError(digits, ParseFailure.OVERFLOW, literal=literal)
    return value


def parse_uint(text: str, bits: int) -> int:
    digits, base = detect_base(text)
    return _parse_digits(digits, base, bits, text)


def parse_u16(text: str) -> int:
    return parse_uint(text, 16)


def parse_u32(text: str) -> int:
    return parse_uint(text, 32)

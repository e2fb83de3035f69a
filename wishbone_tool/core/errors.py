"""Domain-specific errors for wishbone-tool."""

from __future__ import annotations

from enum import Enum


class WishboneToolError(Exception):
    """Base error for wishbone-tool."""


class ProfileLoadError(WishboneToolError):
    """Raised when a profile file cannot be read."""


class ProfileValidationError(WishboneToolError):
    """Raised when a profile file does not conform to schema."""


class ConfigError(WishboneToolError):
    """Base error for command-line configuration failures."""


class ParseFailure(str, Enum):
    """Reason a numeric literal could not be parsed."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    OVERFLOW = "number too large to fit in target type"


class NumberParseError(ConfigError):
    """Raised when a numeric flag value cannot be parsed under its base.

    `text` is the digit string left after the base prefix was stripped,
    `literal` is the value as the user typed it.
    """

    def __init__(self, text: str, reason: ParseFailure, *, literal: str | None = None) -> None:
        self.text = text
        self.reason = reason
        self.literal = text if literal is None else literal
        super().__init__(f"Could not parse '{self.literal}' as a number: {reason.value}")


class UnknownServerKind(ConfigError):
    """Raised when the server kind does not name a known operation."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unknown server kind '{text}'")


class NoOperationSpecified(ConfigError):
    """Raised when neither a memory address nor a server kind was given."""

    def __init__(self) -> None:
        super().__init__("No operation specified. Pass an address or choose a server kind.")

"""Errors raised while parsing `.offer` files.

One class per failure kind; each carries the offending line or rule name
in ``value`` and, where known, the 1-based line number in ``lineno``.
"""
from __future__ import annotations


class OfferParseError(Exception):
    """Base error for this package."""

    template = "{}"

    def __init__(self, value: str, *, lineno: int | None = None):
        super().__init__(self.template.format(value))
        self.value = value
        self.lineno = lineno


class OfferIOError(OfferParseError):
    """The source could not be opened or read as text."""

    template = "IO Error: {}"


class InvalidFormatError(OfferParseError):
    """A line does not have the shape its rule expects."""

    template = "Invalid format in line: {}"


class MissingFieldError(OfferParseError):
    """A required rule never appeared."""

    template = "Missing required field: {}"


class DuplicateFieldError(OfferParseError):
    """A rule appeared more than once."""

    template = "Duplicate field detected: {}"


class UnknownRuleError(OfferParseError):
    """A line matched none of the known rules."""

    template = "Unknown rule: {}"


class InvalidNumberError(OfferParseError):
    """A numeric value could not be converted."""

    template = "Invalid number in line: {}"


class EmptyValueError(OfferParseError):
    """A rule resolved to an empty value or list."""

    template = "Empty value for field: {}"

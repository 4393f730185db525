"""Exceptions raised by the keyword extraction pipeline."""
from __future__ import annotations


class TextRankError(Exception):
    """Base class for all package errors."""


class TokenizationError(TextRankError):
    """The tokenizer could not turn the input into tagged terms."""


class InvalidArgumentError(TextRankError, ValueError):
    """A public call received an argument it cannot work with (e.g. ``None``)."""

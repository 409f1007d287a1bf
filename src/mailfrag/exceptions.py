"""Exceptions for mailfrag email fragment parsing."""

from dataclasses import dataclass


class ParseError(Exception):
    """Base exception for all parsing errors."""

    pass


@dataclass
class InvalidInputError(ParseError):
    """Input is not valid for processing.

    Raised when:
    - Input is not a str (bytes must be decoded by the caller)
    """

    message: str

    def __str__(self) -> str:
        return self.message

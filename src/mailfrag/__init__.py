"""mailfrag - Split plain-text email bodies into visible and hidden fragments."""

from mailfrag.exceptions import (
    InvalidInputError,
    ParseError,
)
from mailfrag.parser import EmailReplyParser, ParsedEmail
from mailfrag.pipeline import (
    ClassifiedLine,
    Fragment,
    FragmentScanner,
    LineClassifier,
    NormalizedBody,
    Normalizer,
)

__version__ = "0.1.0"

__all__ = [
    "ClassifiedLine",
    "EmailReplyParser",
    "Fragment",
    "FragmentScanner",
    "InvalidInputError",
    "LineClassifier",
    "NormalizedBody",
    "Normalizer",
    "ParseError",
    "ParsedEmail",
]

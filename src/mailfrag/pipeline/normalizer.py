"""Text normalization for plain-text email bodies.

Handles:
- Line ending normalization
- Blank line insertion above underscore rules
"""

from dataclasses import dataclass

from mailfrag.exceptions import InvalidInputError
from mailfrag.patterns.separators import separate_underscore_rules


@dataclass(frozen=True, slots=True)
class NormalizedBody:
    """Result of normalizing an email body.

    Attributes:
        lines: Normalized lines (without line endings), top to bottom.
        text: Full normalized text with newlines.
    """

    lines: tuple[str, ...]
    text: str


class Normalizer:
    """Normalizes email body text for the fragment scanner.

    Applies the following transformations:
    1. Line ending normalization (CRLF/CR → LF)
    2. Blank line before underscore rules (optional)

    Nothing else is touched: the scanner relies on the text being
    reproducible from its fragments.
    """

    def __init__(self, *, split_underscore_rules: bool = True) -> None:
        """Initialize the normalizer.

        Args:
            split_underscore_rules: If True, make sure every line of seven
                or more underscores is preceded by a blank line.
        """
        self._split_underscore_rules = split_underscore_rules

    def normalize(self, text: str) -> NormalizedBody:
        """Normalize email body text.

        Args:
            text: Raw email body. May be empty.

        Returns:
            NormalizedBody with normalized lines and text. Empty text
            yields a single empty line.

        Raises:
            InvalidInputError: If text is not a str.
        """
        if not isinstance(text, str):
            raise InvalidInputError(message=f"Expected str, got {type(text).__name__}")

        # Normalize line endings: CRLF and CR to LF
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        if self._split_underscore_rules:
            text = separate_underscore_rules(text)

        return NormalizedBody(
            lines=tuple(text.split("\n")),
            text=text,
        )

"""EmailReplyParser - Main public interface for fragment parsing.

Provides two parsing methods:
- read(): Full fragment list with visibility flags
- parse_reply(): Only the visible text of the message
"""

import logging
from dataclasses import dataclass

from mailfrag.pipeline.normalizer import Normalizer
from mailfrag.pipeline.scanner import Fragment, FragmentScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedEmail:
    """A parsed email body.

    Attributes:
        fragments: All fragments in reading order.
    """

    fragments: tuple[Fragment, ...]

    @property
    def visible_text(self) -> str:
        """Content of the fragments that are not hidden, trailing whitespace trimmed."""
        visible = [fragment.content for fragment in self.fragments if not fragment.is_hidden]
        return "\n".join(visible).rstrip()

    @property
    def hidden_fragments(self) -> tuple[Fragment, ...]:
        """Fragments left out of the visible text."""
        return tuple(fragment for fragment in self.fragments if fragment.is_hidden)

    @property
    def has_signature(self) -> bool:
        """Whether any fragment was detected as a signature."""
        return any(fragment.is_signature for fragment in self.fragments)

    @property
    def has_quotes(self) -> bool:
        """Whether any fragment is a reply quote."""
        return any(fragment.is_quoted for fragment in self.fragments)


class EmailReplyParser:
    """Main class for splitting plain-text email bodies into fragments.

    The parsing pipeline:
    1. Normalize text (line endings, underscore rules)
    2. Scan lines bottom-up into fragments
    3. Mark trailing quotes, signatures and blank fragments hidden

    Example:
        parser = EmailReplyParser()

        # Fragments with flags
        email = parser.read(body)
        for fragment in email.fragments:
            print(fragment.is_quoted, fragment.is_hidden, fragment.content)

        # Just the reply
        reply = parser.parse_reply(body)
    """

    def __init__(self, *, split_underscore_rules: bool = True) -> None:
        """Initialize the parser.

        Args:
            split_underscore_rules: If True, a line of underscores always
                starts a new fragment, even when the reply is typed directly
                above it.
        """
        self._normalizer = Normalizer(split_underscore_rules=split_underscore_rules)
        self._scanner = FragmentScanner()

    def read(self, text: str) -> ParsedEmail:
        """Split an email body into fragments.

        Args:
            text: Email body text (no headers). May be empty.

        Returns:
            ParsedEmail with fragments in reading order.

        Raises:
            InvalidInputError: If text is not a str.
        """
        normalized = self._normalizer.normalize(text)
        return ParsedEmail(fragments=self._scanner.scan(normalized))

    def parse_reply(self, text: str) -> str:
        """Extract the visible text of an email body.

        Args:
            text: Email body text (no headers). May be empty.

        Returns:
            Visible text; empty if every fragment is hidden.

        Raises:
            InvalidInputError: If text is not a str.
        """
        visible_text = self.read(text).visible_text
        if not visible_text:
            logger.debug("No visible text in %d characters of input", len(text))
        return visible_text

"""Line classification for the fragment scanner.

Trims each line and evaluates the three line predicates:
- Quoted line (> markers)
- Reply header ("On ... wrote:")
- Signature opener (--, __, -Name, "Sent from my ...")
"""

from dataclasses import dataclass

from mailfrag.patterns.quotes import is_quote_header, is_quoted_line
from mailfrag.patterns.signatures import is_signature_line


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A trimmed line with its classification.

    Attributes:
        text: Line text. Trailing whitespace is trimmed unless the line
            is a signature opener.
        is_quoted: Line starts with one or more > markers.
        is_quote_header: Line is an "On ... wrote:" reply header.
        is_signature: Trimmed line can open a signature block.
    """

    text: str
    is_quoted: bool
    is_quote_header: bool
    is_signature: bool

    @property
    def is_empty(self) -> bool:
        """Whether nothing is left of the line after trimming."""
        return self.text == ""


class LineClassifier:
    """Classifies single lines of a normalized email body."""

    def classify(self, line: str) -> ClassifiedLine:
        """Trim a line and classify it.

        Signature openers keep their trailing whitespace so that "-- "
        survives in the fragment content.

        Args:
            line: A single line without its line ending.

        Returns:
            ClassifiedLine with trimmed text and predicate results.
        """
        is_signature = is_signature_line(line)
        if not is_signature:
            line = line.rstrip()
            # A mobile footer only matches once its trailing blanks are gone
            is_signature = is_signature_line(line)

        return ClassifiedLine(
            text=line,
            is_quoted=is_quoted_line(line),
            is_quote_header=is_quote_header(line),
            is_signature=is_signature,
        )

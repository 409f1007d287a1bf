"""Fragment scanner for plain-text email bodies.

Walks the normalized lines from the bottom of the message to the top and
groups them into fragments:
- Lines with the same quoted/unquoted classification are merged
- Reply headers and blank lines are absorbed into a quoted fragment
- A fragment opened by a signature line is sealed at the next blank line
- Quoted, signature and blank fragments are hidden until the first
  fragment with original content is sealed

Example, read top to bottom:

    some original text          (visible)

    > do you have any two's?    (quoted, visible)

    Go fish!                    (visible)

    > --
    > Player 1                  (quoted, hidden)

    --
    Player 2                    (signature, hidden)
"""

import logging
from dataclasses import dataclass, field

from mailfrag.pipeline.classifier import ClassifiedLine, LineClassifier
from mailfrag.pipeline.normalizer import NormalizedBody

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Fragment:
    """A contiguous run of lines sharing one classification.

    Attributes:
        lines: Lines in reading order.
        is_quoted: Lines are part of a reply quote.
        is_signature: Fragment is opened by a signature line.
        is_hidden: Fragment is quoted, signature or blank, and no
            original content follows it.
    """

    lines: tuple[str, ...]
    is_quoted: bool
    is_signature: bool
    is_hidden: bool

    @property
    def content(self) -> str:
        """Lines joined with newlines."""
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        """Whether the fragment holds only whitespace."""
        return not "".join(self.lines).strip()


@dataclass(slots=True)
class _OpenFragment:
    """A fragment still receiving lines, held in scan (bottom-up) order."""

    is_quoted: bool
    lines: list[ClassifiedLine] = field(default_factory=list)
    is_signature: bool = False

    @property
    def top_line(self) -> ClassifiedLine:
        """The line added most recently, i.e. the highest one so far."""
        return self.lines[-1]

    @property
    def is_empty(self) -> bool:
        return all(not line.text.strip() for line in self.lines)

    def accepts(self, line: ClassifiedLine) -> bool:
        """Check if a line continues this fragment.

        A reply header is not quoted itself but belongs to the quote block
        below it. Blank padding inside quoted text is kept with the quote.
        """
        if line.is_quoted == self.is_quoted:
            return True
        return self.is_quoted and (line.is_quote_header or line.is_empty)


class _ScanState:
    """Mutable state of a single scan."""

    def __init__(self) -> None:
        self.current: _OpenFragment | None = None
        self.found_visible = False
        self.sealed: list[Fragment] = []

    def seal(self) -> None:
        """Close the current fragment and decide whether it is hidden.

        Sealed fragments accumulate bottom-up.
        """
        current = self.current
        if current is None:
            return

        is_hidden = False
        if not self.found_visible:
            if current.is_quoted or current.is_signature or current.is_empty:
                is_hidden = True
            else:
                self.found_visible = True

        self.sealed.append(
            Fragment(
                lines=tuple(line.text for line in reversed(current.lines)),
                is_quoted=current.is_quoted,
                is_signature=current.is_signature,
                is_hidden=is_hidden,
            )
        )
        self.current = None


class FragmentScanner:
    """Splits a normalized email body into fragments.

    The scan runs from the last line to the first so that "has original
    content been seen below this point" is known when each fragment is
    sealed. Each call keeps its own state; one scanner can be shared.
    """

    def __init__(self) -> None:
        self._classifier = LineClassifier()

    def scan(self, normalized: NormalizedBody) -> tuple[Fragment, ...]:
        """Split normalized lines into fragments.

        Args:
            normalized: Output from the Normalizer component.

        Returns:
            Fragments in reading (top to bottom) order. Every line of the
            input belongs to exactly one fragment.
        """
        state = _ScanState()

        for raw_line in reversed(normalized.lines):
            self._scan_line(state, self._classifier.classify(raw_line))

        state.seal()

        fragments = tuple(reversed(state.sealed))
        logger.debug(
            "Scanned %d lines into %d fragments (%d hidden)",
            len(normalized.lines),
            len(fragments),
            sum(1 for fragment in fragments if fragment.is_hidden),
        )
        return fragments

    def _scan_line(self, state: _ScanState, line: ClassifiedLine) -> None:
        """Add one line, moving upwards, to the current or a new fragment."""
        # A blank line above a signature opener ends the signature block
        if state.current is not None and line.is_empty:
            if state.current.top_line.is_signature:
                state.current.is_signature = True
                state.seal()

        if state.current is not None and state.current.accepts(line):
            state.current.lines.append(line)
        else:
            state.seal()
            state.current = _OpenFragment(is_quoted=line.is_quoted, lines=[line])

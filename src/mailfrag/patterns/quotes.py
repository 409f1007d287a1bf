"""Reply quote detection for plain-text email lines.

Detects:
- Quoted lines (one or more > markers at the start of the line)
- Reply headers ("On <date>, <name> wrote:") that introduce a quoted block
"""

import re

# One or more > markers at line start
_QUOTE_MARKER_PATTERN = re.compile(r">+")

# Reply header, anchored start-to-end. Headers broken across several
# physical lines are not reassembled.
_QUOTE_HEADER_PATTERN = re.compile(r"On.*wrote:")


def is_quoted_line(line: str) -> bool:
    """Check if a line is part of a reply quote.

    Only markers in the first column count; an indented > is ordinary text.

    Examples of quoted lines:
        > Hi folks
        >> nested reply
        >

    Args:
        line: A single line of text, trailing whitespace already trimmed.

    Returns:
        True if the line starts with a quote marker.
    """
    return _QUOTE_MARKER_PATTERN.match(line) is not None


def is_quote_header(line: str) -> bool:
    """Check if a line is a reply header above a quoted area.

    Examples of quote headers:
        On Tue, 2011-03-01 at 18:02 +0530, Abhishek Kona wrote:
        On Aug 22, 2011, at 7:37 PM, defunkt<reply@reply.github.com> wrote:

    Examples of non-headers:
        One outstanding question I had:
        On Tuesday we wrote: the draft   (does not end with "wrote:")

    Args:
        line: A single line of text, trailing whitespace already trimmed.

    Returns:
        True if the whole line has the "On ... wrote:" shape.
    """
    return _QUOTE_HEADER_PATTERN.fullmatch(line) is not None

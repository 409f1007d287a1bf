"""Horizontal rule detection for plain-text email lines.

Some clients (Outlook in particular) put a line of underscores between
the reply and the quoted message, and users may type their reply directly
above it. Such rules must always start a new fragment.
"""

import re

UNDERSCORE_RULE_MIN_LENGTH = 7

_UNDERSCORE_RULE_PATTERN = re.compile(rf"_{{{UNDERSCORE_RULE_MIN_LENGTH},}}")

# A non-newline character ending a line that is followed by an underscore rule
_TEXT_ABOVE_RULE_PATTERN = re.compile(
    rf"([^\n])(?=\n_{{{UNDERSCORE_RULE_MIN_LENGTH},}}$)", re.MULTILINE
)


def is_underscore_rule(line: str) -> bool:
    """Check if a line consists only of underscores.

    Examples of rules:
        _______
        ________________________________

    Examples of non-rules:
        ______        (too short)
        > ________    (quoted)

    Args:
        line: A single line of text.

    Returns:
        True if the line is seven or more underscores and nothing else.
    """
    return _UNDERSCORE_RULE_PATTERN.fullmatch(line) is not None


def separate_underscore_rules(text: str) -> str:
    """Ensure every underscore rule is preceded by a blank line.

    A newline is inserted only where the line directly above the rule has
    text on it; rules already preceded by a blank line, or at the very
    start of the text, are left alone.

    Args:
        text: Text with LF line endings.

    Returns:
        Text with a blank line above each underscore rule.
    """
    return _TEXT_ABOVE_RULE_PATTERN.sub("\\1\n", text)

"""Signature and mobile footer detection for plain-text email lines.

A signature block starts with one of:
- A dash or underscore rule (--, -- , ------, ______)
- A dash directly followed by a name (-Abhishek Kona)
- A mobile client footer (Sent from my iPhone)

Note: The underscore rule that Outlook puts above a quoted message is
also split out by the normalizer, see separators.py
"""

import re

# Rule markers, allowing leading indentation
_RULE_PATTERN = re.compile(r"\s*(?:--|__)")

# Dash immediately followed by a word character, in the first column
_DASH_NAME_PATTERN = re.compile(r"-\w")

# "Sent from my" followed by one to three words, nothing else on the line
_MOBILE_FOOTER_PATTERN = re.compile(r"Sent from my (?:\s*\w+){1,3}")


def is_mobile_footer(line: str) -> bool:
    """Check if a line is a mobile client footer.

    Examples:
        Sent from my iPhone
        Sent from my Verizon Wireless BlackBerry

    Examples of non-footers:
        Sent from my desk, is much easier then my mobile phone.

    Args:
        line: A single line of text.

    Returns:
        True if the whole line is "Sent from my" plus up to three words.
    """
    return _MOBILE_FOOTER_PATTERN.fullmatch(line) is not None


def is_signature_line(line: str) -> bool:
    """Check if a line can open a signature block.

    The check is made on the untrimmed line: a signature marker keeps its
    trailing whitespace ("-- " is the conventional delimiter).

    Args:
        line: A single line of text.

    Returns:
        True if the line looks like the first line of a signature.
    """
    if _RULE_PATTERN.match(line):
        return True
    if _DASH_NAME_PATTERN.match(line):
        return True
    return is_mobile_footer(line)

"""Line patterns for plain-text email fragment classification."""

from mailfrag.patterns.quotes import is_quote_header, is_quoted_line
from mailfrag.patterns.separators import (
    UNDERSCORE_RULE_MIN_LENGTH,
    is_underscore_rule,
    separate_underscore_rules,
)
from mailfrag.patterns.signatures import is_mobile_footer, is_signature_line

__all__ = [
    "UNDERSCORE_RULE_MIN_LENGTH",
    "is_mobile_footer",
    "is_quote_header",
    "is_quoted_line",
    "is_signature_line",
    "is_underscore_rule",
    "separate_underscore_rules",
]

#!/usr/bin/env python
"""Inspect how an email body is split into fragments.

Usage:
    python scripts/inspect_email.py tests/fixtures/emails/email_1_2.txt
    python scripts/inspect_email.py body.txt --line 12        # Classification of line 12
    python scripts/inspect_email.py body.txt --search "wrote" # Find and show line
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailfrag.parser import EmailReplyParser, ParsedEmail
from mailfrag.pipeline.classifier import LineClassifier
from mailfrag.pipeline.normalizer import Normalizer


def _flag(value: bool, letter: str) -> str:
    return letter if value else "."


def print_fragment_table(email: ParsedEmail) -> None:
    """Print every line with the flags of the fragment it belongs to.

    Flags are Q(uoted), S(ignature), H(idden), E(mpty).
    """
    print("FRAGMENTS:")
    print(f"  {'Line':>4}  {'Frag':>4}  {'Flags':<5}  Text")
    print(f"  {'-'*4}  {'-'*4}  {'-'*5}  {'-'*60}")

    line_no = 0
    for frag_idx, fragment in enumerate(email.fragments):
        flags = (
            _flag(fragment.is_quoted, "Q")
            + _flag(fragment.is_signature, "S")
            + _flag(fragment.is_hidden, "H")
            + _flag(fragment.is_empty, "E")
        )
        for text in fragment.lines:
            text_preview = text[:60] + "..." if len(text) > 60 else text
            print(f"  {line_no:>4}  {frag_idx:>4}  {flags:<5}  {text_preview if text else '(blank)'}")
            line_no += 1


def print_line_details(raw_line: str, index: int) -> None:
    """Print the classification of a single normalized line."""
    line = LineClassifier().classify(raw_line)

    print(f"Line {index}: {raw_line!r}")
    print(f"  trimmed text:    {line.text!r}")
    print(f"  is_empty:        {line.is_empty}")
    print(f"  is_quoted:       {line.is_quoted}")
    print(f"  is_quote_header: {line.is_quote_header}")
    print(f"  is_signature:    {line.is_signature}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("path", type=Path, help="Plain-text email body file")
    parser.add_argument("--line", type=int, help="Normalized line index to inspect")
    parser.add_argument("--search", type=str, help="Search for text in lines")
    parser.add_argument(
        "--no-split-rules",
        action="store_true",
        help="Do not insert a blank line above underscore rules",
    )
    args = parser.parse_args()

    if not args.path.exists():
        print(f"Error: File not found: {args.path}")
        sys.exit(1)

    text = args.path.read_text(encoding="utf-8")
    split_rules = not args.no_split_rules

    email = EmailReplyParser(split_underscore_rules=split_rules).read(text)
    lines = Normalizer(split_underscore_rules=split_rules).normalize(text).lines

    print(f"Email: {args.path}")
    print("=" * 80)
    print()

    # Find target line if --search specified
    target_idx = args.line
    if args.search:
        for i, line in enumerate(lines):
            if args.search in line:
                target_idx = i
                print(f"Found '{args.search}' at line {i}")
                print()
                break
        else:
            print(f"'{args.search}' not found in any line")
            return

    print_fragment_table(email)

    print()
    print("VISIBLE TEXT:")
    print(email.visible_text if email.visible_text else "(none)")

    if target_idx is not None:
        if not 0 <= target_idx < len(lines):
            print(f"\nError: Line {target_idx} out of range (max {len(lines) - 1})")
            return

        print()
        print("=" * 80)
        print_line_details(lines[target_idx], target_idx)


if __name__ == "__main__":
    main()

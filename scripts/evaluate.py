#!/usr/bin/env python3
"""Evaluation script for email reply fragment parsing.

Loads labelled cases, runs the parser, and reports how often the visible
text matches the expected reply.

Each JSONL line holds:
    {"text": "<email body>", "visible_text": "<expected reply>", "metadata": {...}}

Usage:
    python scripts/evaluate.py data/cases.jsonl
    python scripts/evaluate.py data/cases.jsonl --verbose
"""

import argparse
import json
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailfrag import EmailReplyParser


@dataclass
class CaseEvaluation:
    """Evaluation result for a single case."""

    text: str
    expected: str
    visible_text: str

    exact_match: bool
    content_match: bool

    fragment_count: int
    signature_detected: bool
    metadata: dict


@dataclass
class EvaluationResults:
    """Aggregated evaluation results."""

    total: int = 0
    exact_matches: int = 0
    content_matches: int = 0  # Matches after whitespace normalization

    # Over-extraction: expected reply is a strict part of the visible text
    over_extracted: int = 0
    # Under-extraction: visible text is a strict part of the expected reply
    under_extracted: int = 0

    fragment_counts: Counter = field(default_factory=Counter)
    failures: list[CaseEvaluation] = field(default_factory=list)

    @property
    def exact_match_rate(self) -> float:
        return self.exact_matches / self.total if self.total > 0 else 0.0

    @property
    def content_match_rate(self) -> float:
        return self.content_matches / self.total if self.total > 0 else 0.0


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace for content comparison."""
    # Split into non-empty lines, strip each, rejoin with single newlines
    lines = [line.strip() for line in text.strip().split("\n")]
    return "\n".join(line for line in lines if line)


def load_cases(path: Path) -> list[dict]:
    """Load cases from JSONL file."""
    cases = []
    with open(path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                cases.append(json.loads(line))
            except json.JSONDecodeError as e:
                print(f"Warning: Skipping invalid JSON at line {line_num}: {e}")
    return cases


def evaluate_single(
    parser: EmailReplyParser,
    case: dict,
    results: EvaluationResults,
    verbose: bool = False,
) -> CaseEvaluation:
    """Evaluate parsing on a single case."""
    text = case["text"]
    expected = case["visible_text"]
    metadata = case.get("metadata", {})

    email = parser.read(text)
    visible_text = email.visible_text

    exact_match = visible_text == expected.rstrip()
    content_match = normalize_whitespace(visible_text) == normalize_whitespace(expected)

    results.fragment_counts[len(email.fragments)] += 1
    if exact_match:
        results.exact_matches += 1
    if content_match:
        results.content_matches += 1
    elif normalize_whitespace(expected) in normalize_whitespace(visible_text):
        results.over_extracted += 1
    elif normalize_whitespace(visible_text) in normalize_whitespace(expected):
        results.under_extracted += 1

    evaluation = CaseEvaluation(
        text=text,
        expected=expected,
        visible_text=visible_text,
        exact_match=exact_match,
        content_match=content_match,
        fragment_count=len(email.fragments),
        signature_detected=email.has_signature,
        metadata=metadata,
    )

    if not content_match:
        results.failures.append(evaluation)

        if verbose:
            source = metadata.get("source", "unknown")
            print(f"\n--- Failure ({source}) ---")
            print(f"Expected ({len(expected)} chars):")
            print(expected[:200] + "..." if len(expected) > 200 else expected)
            print(f"\nVisible ({len(visible_text)} chars, {len(email.fragments)} fragments):")
            print(visible_text[:200] + "..." if len(visible_text) > 200 else visible_text)
            print()

    return evaluation


def print_results(results: EvaluationResults) -> None:
    """Print evaluation results summary."""
    print("\n" + "=" * 60)
    print("EVALUATION RESULTS")
    print("=" * 60)

    print("\n--- Primary Metrics ---")
    print(f"Total cases:         {results.total}")
    print(f"Content match rate:  {100 * results.content_match_rate:.2f}% ({results.content_matches}/{results.total})")
    print(f"Exact match rate:    {100 * results.exact_match_rate:.2f}% ({results.exact_matches}/{results.total})")

    print("\n--- Failure Analysis ---")
    print(f"Over-extracted:      {results.over_extracted} (quote or signature leaked into reply)")
    print(f"Under-extracted:     {results.under_extracted} (reply content hidden)")

    if results.fragment_counts:
        print("\n--- Fragments per Email ---")
        for count, cases in sorted(results.fragment_counts.items()):
            print(f"  {count:>3}: {cases}")

    if results.failures:
        print("\n--- Failures by Source ---")
        sources = Counter(f.metadata.get("source", "unknown") for f in results.failures)
        for source, count in sources.most_common():
            print(f"  {source}: {count}")

    print("\n" + "=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Evaluate email reply fragment parsing"
    )
    parser.add_argument(
        "cases",
        type=Path,
        help="Path to JSONL cases file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print details for each failure",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=int,
        default=None,
        help="Limit number of cases to evaluate",
    )
    parser.add_argument(
        "--no-split-rules",
        action="store_true",
        help="Do not insert a blank line above underscore rules",
    )

    args = parser.parse_args()

    if not args.cases.exists():
        print(f"Error: Cases file not found: {args.cases}")
        sys.exit(1)

    print(f"Loading cases from {args.cases}...")
    cases = load_cases(args.cases)
    print(f"Loaded {len(cases)} cases")

    if args.limit:
        cases = cases[:args.limit]
        print(f"Limiting to {len(cases)} cases")

    reply_parser = EmailReplyParser(split_underscore_rules=not args.no_split_rules)

    print("Evaluating...")
    results = EvaluationResults()

    for i, case in enumerate(cases):
        results.total += 1
        evaluate_single(reply_parser, case, results, verbose=args.verbose)

        # Progress indicator
        if (i + 1) % 500 == 0:
            print(f"  Processed {i + 1}/{len(cases)}")

    print_results(results)


if __name__ == "__main__":
    main()

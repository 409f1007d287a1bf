"""Tests for the FragmentScanner component."""

import pytest

from mailfrag import Fragment, FragmentScanner, Normalizer


def _scan(text: str) -> tuple[Fragment, ...]:
    """Helper to normalize and scan text."""
    normalizer = Normalizer()
    scanner = FragmentScanner()
    return scanner.scan(normalizer.normalize(text))


def _flags(fragments: tuple[Fragment, ...]) -> list[tuple[bool, bool, bool]]:
    """(is_quoted, is_signature, is_hidden) per fragment."""
    return [(f.is_quoted, f.is_signature, f.is_hidden) for f in fragments]


class TestFragmentGrouping:
    """Continuity rules for merging lines into fragments."""

    def test_plain_text_single_fragment(self) -> None:
        """Text without quotes or signatures is one visible fragment."""
        fragments = _scan("Hello,\n\nJust checking in.\nThanks")

        assert len(fragments) == 1
        assert fragments[0].content == "Hello,\n\nJust checking in.\nThanks"
        assert _flags(fragments) == [(False, False, False)]

    def test_quoted_block_splits_fragments(self) -> None:
        """Switching between quoted and unquoted lines starts a new fragment."""
        fragments = _scan("Reply\n> quoted\n> more")

        assert [f.lines for f in fragments] == [("Reply",), ("> quoted", "> more")]
        assert [f.is_quoted for f in fragments] == [False, True]

    def test_quote_header_joins_quote_below(self) -> None:
        """A reply header is absorbed into the quoted fragment under it."""
        fragments = _scan("Reply\nOn Mon, Jane wrote:\n> quoted")

        assert [f.lines for f in fragments] == [
            ("Reply",),
            ("On Mon, Jane wrote:", "> quoted"),
        ]
        assert fragments[1].is_quoted is True

    def test_quote_header_without_quote_is_content(self) -> None:
        """A reply header with no quote below stays ordinary content."""
        fragments = _scan("On Mon, Jane wrote:\nHello")

        assert len(fragments) == 1
        assert fragments[0].is_quoted is False

    def test_blank_lines_inside_quote_absorbed(self) -> None:
        """Blank padding between quoted lines keeps the quote together."""
        fragments = _scan("> first\n\n> second")

        assert len(fragments) == 1
        assert fragments[0].lines == ("> first", "", "> second")

    def test_blank_line_above_quote_joins_quote(self) -> None:
        """The blank line separating a reply from a quote belongs to the quote."""
        fragments = _scan("Reply\n\n> quoted")

        assert [f.lines for f in fragments] == [("Reply",), ("", "> quoted")]

    def test_lines_are_trimmed(self) -> None:
        """Trailing whitespace is removed from ordinary lines."""
        fragments = _scan("Hello   \n  indented  ")

        assert fragments[0].lines == ("Hello", "  indented")


class TestSignatureDetection:
    """Signature fragments."""

    def test_delimiter_with_blank_line_above(self) -> None:
        """A "-- " block preceded by a blank line is a hidden signature."""
        fragments = _scan("Thanks\n\n-- \nJane")

        assert fragments[-1].lines == ("-- ", "Jane")
        assert fragments[-1].is_signature is True
        assert fragments[-1].is_hidden is True

    def test_delimiter_without_blank_line_above(self) -> None:
        """Without a blank line above, the delimiter is ordinary content."""
        fragments = _scan("Thanks\n-- \nJane")

        assert len(fragments) == 1
        assert fragments[0].is_signature is False
        assert fragments[0].is_hidden is False

    def test_signature_at_top_of_message(self) -> None:
        """A signature opener on the first line is never sealed as a signature."""
        fragments = _scan("-- \nJane")

        assert len(fragments) == 1
        assert fragments[0].is_signature is False

    def test_dash_name_signature(self) -> None:
        """A "-Name" line opens a signature."""
        fragments = _scan("Body text\n\n-Abhishek Kona")

        assert fragments[-1].content == "-Abhishek Kona"
        assert fragments[-1].is_signature is True

    def test_mobile_footer_signature(self) -> None:
        """"Sent from my ..." opens a signature."""
        fragments = _scan("Here is another email\n\nSent from my iPhone")

        assert fragments[-1].content == "Sent from my iPhone"
        assert fragments[-1].is_signature is True
        assert fragments[-1].is_hidden is True

    def test_signature_above_visible_content_stays_visible(self) -> None:
        """A signature with original content below it is not hidden."""
        fragments = _scan("Hi\n\n-- \nsig\n\n> quote\n\nReply")

        assert [f.lines for f in fragments] == [
            ("Hi", ""),
            ("-- ", "sig"),
            ("", "> quote"),
            ("", "Reply"),
        ]
        assert _flags(fragments) == [
            (False, False, False),
            (False, True, False),
            (True, False, False),
            (False, False, False),
        ]

    def test_quoted_delimiter_not_a_signature(self) -> None:
        """Quoted signatures are hidden as quotes, not signatures."""
        fragments = _scan("Go fish!\n\n> --\n> Player 1")

        assert fragments[-1].is_quoted is True
        assert fragments[-1].is_signature is False
        assert fragments[-1].is_hidden is True


class TestVisibility:
    """Hidden flag propagation."""

    def test_trailing_quote_hidden(self) -> None:
        """A quote with nothing below it is hidden."""
        fragments = _scan("Reply\n> quoted")

        assert [f.is_hidden for f in fragments] == [False, True]

    def test_inline_quote_visible(self) -> None:
        """A quote followed by original content stays visible."""
        fragments = _scan("Intro\n> quoted\nReply")

        assert [f.is_hidden for f in fragments] == [False, False, False]

    def test_blank_fragment_at_end_hidden(self) -> None:
        """A blank fragment below all content is hidden."""
        fragments = _scan("Reply\n> quoted\n\n")

        assert [f.lines for f in fragments] == [("Reply",), ("> quoted",), ("", "")]
        assert [f.is_hidden for f in fragments] == [False, True, True]

    def test_only_quotes_all_hidden(self) -> None:
        """A message holding only quoted text has nothing visible."""
        fragments = _scan("On Mon, Jane wrote:\n> quoted")

        assert all(f.is_hidden for f in fragments)


class TestEdgeCases:
    """Edge cases."""

    def test_empty_input(self) -> None:
        """Empty input yields a single empty hidden fragment."""
        fragments = _scan("")

        assert len(fragments) == 1
        assert fragments[0].lines == ("",)
        assert fragments[0].is_empty is True
        assert _flags(fragments) == [(False, False, True)]

    def test_whitespace_only_input(self) -> None:
        """Whitespace-only input yields one empty hidden fragment."""
        fragments = _scan("   \n\t\n")

        assert len(fragments) == 1
        assert fragments[0].is_empty is True
        assert fragments[0].is_hidden is True

    def test_scanner_is_reusable(self) -> None:
        """A scanner keeps no state between calls."""
        normalizer = Normalizer()
        scanner = FragmentScanner()

        first = scanner.scan(normalizer.normalize("Reply\n> quoted"))
        scanner.scan(normalizer.normalize("Other text"))
        again = scanner.scan(normalizer.normalize("Reply\n> quoted"))

        assert first == again

    def test_fragment_immutable(self) -> None:
        """Fragments cannot be modified after sealing."""
        fragment = _scan("Hello")[0]

        with pytest.raises(AttributeError):
            fragment.is_hidden = True  # type: ignore[misc]


class TestScenario:
    """Reply with a trailing quote and a signature."""

    TEXT = "Hello,\n\nSee below.\n\n> old message\n> more quote\n\n-- \nJane"

    def test_fragments(self) -> None:
        """Content, quote, blank separator and signature are split apart."""
        fragments = _scan(self.TEXT)

        assert [f.content for f in fragments] == [
            "Hello,\n\nSee below.",
            "\n> old message\n> more quote",
            "",
            "-- \nJane",
        ]

    def test_flags(self) -> None:
        """Only the original content is visible."""
        fragments = _scan(self.TEXT)

        assert _flags(fragments) == [
            (False, False, False),
            (True, False, True),
            (False, False, True),
            (False, True, True),
        ]

"""Tests for inline span resolution.

Covers the priority order between pattern families, exclude-range
bookkeeping, and the escaping rule for bold and italic delimiters.
"""

import time

import pytest

from mdpreview.inline import ALL_FAMILIES, collect_matches, resolve
from mdpreview.nodes import InlineKind, InlineSpan

N = InlineKind.NORMAL
B = InlineKind.BOLD
I = InlineKind.ITALIC  # noqa: E741
S = InlineKind.STRIKETHROUGH
U = InlineKind.UNDERLINE
SP = InlineKind.SPOILER


def spans(*pairs: tuple[InlineKind, str]) -> list[InlineSpan]:
    return [InlineSpan(kind, text) for kind, text in pairs]


class TestSingleFamilies:
    """Each family on its own."""

    def test_empty_line(self) -> None:
        assert resolve("") == []

    def test_plain_line(self) -> None:
        assert resolve("just text") == spans((N, "just text"))

    @pytest.mark.parametrize(
        "line,kind,inner",
        [
            ("**bold**", B, "bold"),
            ("__bold__", B, "bold"),
            ("*italic*", I, "italic"),
            ("_italic_", I, "italic"),
            ("~~gone~~", S, "gone"),
            ("&under&", U, "under"),
            ("||secret||", SP, "secret"),
        ],
    )
    def test_whole_line(self, line: str, kind: InlineKind, inner: str) -> None:
        assert resolve(line) == spans((kind, inner))

    def test_gaps_around_match(self) -> None:
        assert resolve("a ~~b~~ c") == spans((N, "a "), (S, "b"), (N, " c"))

    def test_non_greedy(self) -> None:
        assert resolve("**a** x **b**") == spans((B, "a"), (N, " x "), (B, "b"))

    def test_unclosed_delimiters_stay_plain(self) -> None:
        assert resolve("**open and ~~never") == spans((N, "**open and ~~never"))

    def test_inner_whitespace_kept(self) -> None:
        assert resolve("* spaced *") == spans((I, " spaced "))

    def test_intraword_underscore_is_italic(self) -> None:
        assert resolve("use my_var_name here") == spans(
            (N, "use my"), (I, "var"), (N, "name here")
        )


class TestPriority:
    """Earlier families claim ranges that later families cannot touch."""

    def test_bold_then_italic(self) -> None:
        assert resolve("**bold** and *italic*") == spans(
            (B, "bold"), (N, " and "), (I, "italic")
        )

    def test_italic_cannot_start_on_bold_closer(self) -> None:
        matches = collect_matches("**bold** and *italic*", ALL_FAMILIES)
        assert [(m.kind, m.start, m.length) for m in matches] == [(B, 0, 8), (I, 13, 8)]

    def test_bold_inside_italic_delimiters(self) -> None:
        assert resolve("*a **b** c*") == spans((N, "*a "), (B, "b"), (N, " c*"))

    def test_strikethrough_blocks_underline(self) -> None:
        assert resolve("~~a &b~~ c&") == spans((S, "a &b"), (N, " c&"))

    def test_bold_styles_share_claims(self) -> None:
        assert resolve("**a __b** c__") == spans((B, "a __b"), (N, " c__"))

    def test_italic_styles_share_claims(self) -> None:
        assert resolve("*a _b* c_") == spans((I, "a _b"), (N, " c_"))

    def test_spoiler_inside_bold_is_not_nested(self) -> None:
        assert resolve("**||x||**") == spans((B, "||x||"))

    def test_all_families_in_one_line(self) -> None:
        line = "**b** *i* ~~s~~ &u& ||p||"
        assert resolve(line) == spans(
            (B, "b"),
            (N, " "),
            (I, "i"),
            (N, " "),
            (S, "s"),
            (N, " "),
            (U, "u"),
            (N, " "),
            (SP, "p"),
        )


class TestEscapes:
    """A backslash before a bold or italic delimiter disables it."""

    def test_escaped_bold(self) -> None:
        line = r"\*\*not bold\*\*"
        assert resolve(line) == spans((N, line))

    def test_escaped_italic(self) -> None:
        line = r"\*not italic\*"
        assert resolve(line) == spans((N, line))

    def test_escaped_underscores(self) -> None:
        line = r"\_\_x\_\_"
        assert resolve(line) == spans((N, line))

    def test_escaped_delimiter_inside_bold(self) -> None:
        assert resolve(r"**a\**b**") == spans((B, r"a\**b"))

    def test_escaped_opener_only(self) -> None:
        assert resolve(r"\*a* b") == spans((N, r"\*a* b"))

    def test_escape_does_not_apply_to_strikethrough(self) -> None:
        assert resolve(r"\~~x~~") == spans((N, "\\"), (S, "x"))

    @pytest.mark.parametrize("delimiter", ["*", "**", "_", "__"])
    def test_long_run_of_escapes_without_closer(self, delimiter: str) -> None:
        line = delimiter + "\\a" * 2000
        start = time.perf_counter()
        result = resolve(line)
        elapsed = time.perf_counter() - start
        assert result == spans((N, line))
        assert elapsed < 1.0

    def test_long_run_of_escapes_with_closer(self) -> None:
        inner = "\\a" * 2000
        assert resolve(f"**{inner}**") == spans((B, inner))


class TestUnicode:
    """Offsets are code points, consistent with slicing."""

    def test_cjk(self) -> None:
        assert resolve("**粗体** 和 *斜体*") == spans((B, "粗体"), (N, " 和 "), (I, "斜体"))

    def test_astral_characters(self) -> None:
        assert resolve("😀 **x** 🎉") == spans((N, "😀 "), (B, "x"), (N, " 🎉"))


class TestCollectMatches:
    """collect_matches() ordering and bookkeeping."""

    def test_sorted_by_start(self) -> None:
        # Spoiler is found last but starts first.
        matches = collect_matches("||p|| **b**", ALL_FAMILIES)
        assert [m.kind for m in matches] == [SP, B]

    def test_lengths_include_delimiters(self) -> None:
        (match,) = collect_matches("x ||ab|| y", ALL_FAMILIES)
        assert (match.start, match.length, match.end, match.text) == (2, 6, 8, "ab")

    def test_rank_recorded(self) -> None:
        matches = collect_matches("**b** &u&", ALL_FAMILIES)
        assert [m.rank for m in matches] == [0, 3]

    def test_explicit_family_subset(self) -> None:
        bold_only = ALL_FAMILIES[:1]
        matches = collect_matches("**b** *i*", bold_only)
        assert [m.kind for m in matches] == [B]

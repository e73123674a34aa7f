"""Property-based tests for scan invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
The location oracle recomputes line and column from scratch for every
token and compares with the incrementally tracked values.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from scanlet import Lexer, Location, ScanError, Span, create_registry

FULL_COVERAGE = create_registry(
    [
        ("A", r"a+"),
        ("B", r"b+"),
        ("SPACE", r"[ \t]+"),
        ("NEWLINE", r"\n"),
    ]
)

# Lexemes that freely span newlines
MULTILINE = create_registry(
    [
        ("BLOB", r"[ab\n]{1,3}"),
        ("SPACE", r"[ \t]+"),
    ]
)

ALPHABET = "ab \t\n"


def expected_location(source: str, offset: int) -> tuple[int, int]:
    line = 1 + source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    return line, 1 + offset - line_start


class TestCoverage:
    """Tokens tile the source exactly."""

    @given(st.text(alphabet=ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_lexemes_reassemble_source(self, source: str) -> None:
        tokens = list(Lexer(FULL_COVERAGE).tokenize(source))

        assert "".join(t.value for t in tokens) == source

    @given(st.text(alphabet=ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_spans_are_contiguous_and_nonempty(self, source: str) -> None:
        tokens = list(Lexer(MULTILINE).tokenize(source))

        cursor = 0
        for token in tokens:
            assert token.span.start == cursor == token.location.offset
            assert len(token.span) > 0
            cursor = token.span.end
        assert cursor == len(source)


class TestLocationOracle:
    """Incremental tracking agrees with recomputation from scratch."""

    @given(st.text(alphabet=ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_single_line_lexemes(self, source: str) -> None:
        for token in Lexer(FULL_COVERAGE).tokenize(source):
            loc = token.location
            assert (loc.line, loc.column) == expected_location(source, loc.offset)

    @given(st.text(alphabet=ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_multi_line_lexemes(self, source: str) -> None:
        for token in Lexer(MULTILINE).tokenize(source):
            loc = token.location
            assert (loc.line, loc.column) == expected_location(source, loc.offset)

    @given(st.text(alphabet=ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_positions_never_below_origin(self, source: str) -> None:
        previous = Location()
        for token in Lexer(MULTILINE).tokenize(source):
            loc = token.location
            assert loc.line >= 1
            assert loc.column >= 1
            assert loc.offset >= 0
            assert loc.offset > previous.offset or loc.offset == 0
            assert loc.line >= previous.line
            previous = loc


class TestPriority:
    """Earlier definitions always win over later overlapping ones."""

    @given(st.text(alphabet="xyz", min_size=1, max_size=100))
    @settings(max_examples=100)
    def test_first_definition_always_reported(self, source: str) -> None:
        registry = create_registry([("ONE", r"[xyz]"), ("MANY", r"[xyz]+")])
        tokens = list(Lexer(registry).tokenize(source))

        assert len(tokens) == len(source)
        assert {t.identifier for t in tokens} == {"ONE"}


class TestFailure:
    """An unmatched character is reported at its own location."""

    @given(
        st.text(alphabet=ALPHABET, max_size=100),
        st.text(alphabet=ALPHABET, max_size=100),
    )
    @settings(max_examples=100)
    def test_error_at_first_unmatched_char(self, head: str, tail: str) -> None:
        source = head + "?" + tail
        errors: list[Location] = []

        def on_error(location: Location) -> None:
            errors.append(location)
            raise ScanError("stop", location)

        def on_match(location: Location, identifier: str, span: Span) -> None:
            assert span.end <= len(head)

        try:
            Lexer(FULL_COVERAGE).analyze(source, on_match, on_error)
        except ScanError:
            pass

        assert len(errors) == 1
        assert errors[0].offset == len(head)
        assert (errors[0].line, errors[0].column) == expected_location(source, len(head))


class TestDeterminism:
    """Scanning the same source twice gives identical results."""

    @given(st.text(alphabet=ALPHABET, max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        lexer = Lexer(MULTILINE)
        first = [(t.identifier, t.value, t.location) for t in lexer.tokenize(source)]
        second = [(t.identifier, t.value, t.location) for t in lexer.tokenize(source)]

        assert first == second

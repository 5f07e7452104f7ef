"""
test_tokens.py
--------------
Unit tests for people.utils.tokens.

Tests line tokenizing, tab expansion and line classification.
"""
import pytest
from datetime import date

from people.utils.tokens import (
    DateHeader,
    EmptyLine,
    Record,
    Token,
    classify,
    classify_text,
    parse_date_header,
    tokenize,
    tokenize_line,
)


class TestTokenizeLine:
    """Test tokenize_line function."""

    def test_not_indented(self):
        """Top-level line has zero indentation."""
        token = tokenize_line("foo", 3)
        assert token == Token(line_number=3, indentation=0, content="foo")

    def test_indented_with_spaces(self):
        """Leading spaces are counted and stripped."""
        token = tokenize_line("  foo", 0)
        assert token.indentation == 2
        assert token.content == "foo"

    def test_tab_counts_as_two_spaces(self):
        """A tab indents exactly like two spaces."""
        assert tokenize_line("\t- stuff", 0) == tokenize_line("  - stuff", 0)

    def test_mixed_tab_and_spaces(self):
        """Tabs are expanded before measuring."""
        token = tokenize_line("\t  - deep", 0)
        assert token.indentation == 4
        assert token.content == "- deep"

    def test_trailing_whitespace_kept_in_content(self):
        """Only leading whitespace is removed."""
        token = tokenize_line("  foo  ", 0)
        assert token.content == "foo  "

    def test_to_line_rebuilds_expanded_line(self):
        """to_line() gives the tab-expanded line back."""
        assert tokenize_line("\t- x", 0).to_line() == "  - x"


class TestTokenize:
    """Test tokenize function."""

    def test_line_numbers_start_at_zero(self):
        """Lines are numbered from 0 in order."""
        tokens = tokenize("a\nb\nc")
        assert [t.line_number for t in tokens] == [0, 1, 2]

    def test_trailing_newline_gives_final_empty_token(self):
        """Splitting on newline keeps the empty last line."""
        tokens = tokenize("a\n")
        assert len(tokens) == 2
        assert tokens[1].content == ""

    def test_empty_text(self):
        """Empty text is one empty line."""
        assert tokenize("") == [Token(0, 0, "")]


class TestParseDateHeader:
    """Test parse_date_header function."""

    def test_valid_header(self):
        assert parse_date_header(Token(0, 0, "# 2000-01-01")) == date(2000, 1, 1)

    def test_trailing_whitespace_allowed(self):
        assert parse_date_header(Token(0, 0, "# 2000-01-01  ")) == date(2000, 1, 1)

    def test_indented_header_is_not_a_date(self):
        assert parse_date_header(Token(0, 2, "# 2000-01-01")) is None

    def test_heading_text_is_not_a_date(self):
        assert parse_date_header(Token(0, 0, "# Holidays")) is None

    def test_impossible_calendar_date(self):
        assert parse_date_header(Token(0, 0, "# 2000-02-30")) is None

    def test_missing_zero_padding(self):
        assert parse_date_header(Token(0, 0, "# 2000-1-1")) is None

    def test_missing_space_after_hash(self):
        assert parse_date_header(Token(0, 0, "#2000-01-01")) is None

    def test_extra_text_after_date(self):
        assert parse_date_header(Token(0, 0, "# 2000-01-01 birthday")) is None


class TestClassify:
    """Test classify function."""

    def test_empty_line(self):
        assert classify(Token(4, 0, "")) == EmptyLine(4)

    def test_date_header(self):
        assert classify(Token(0, 0, "# 2000-01-01")) == DateHeader(0, date(2000, 1, 1))

    def test_record(self):
        token = Token(1, 0, "- #JohnDoe :")
        assert classify(token) == Record(token)

    def test_indented_blank_is_record(self):
        """Only a line with no indentation and no content is empty."""
        token = tokenize_line("   ", 2)
        assert isinstance(classify(token), Record)

    @pytest.mark.parametrize("content", ["# not-a-date", "# 2000-13-01", "# "])
    def test_unparseable_header_falls_back_to_record(self, content):
        """A `# ` line that is not a valid date is ordinary content."""
        result = classify(Token(0, 0, content))
        assert isinstance(result, Record)
        assert result.token.content == content

    def test_classify_text(self):
        lines = classify_text("# 2000-01-01\n\n- a")
        assert [type(line) for line in lines] == [DateHeader, EmptyLine, Record]
        assert [line.line_number for line in lines] == [0, 1, 2]

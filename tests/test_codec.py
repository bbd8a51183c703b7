"""Unit tests for the .properties line codec."""

import pytest

from core.exceptions import ParsingError, ValidationError
from core.models import LineError, LoadReport, Property
from providers.codec import (
    format_line,
    is_comment_or_blank,
    join_values,
    parse_line,
    split_values,
)


class TestFormatLine:
    """Test line formatting."""

    def test_format_line(self):
        """Test one space on each side of the separator and a trailing newline."""
        assert format_line("HttpPort", "8081") == "HttpPort = 8081\n"

    def test_format_line_no_escaping(self):
        """Test values are written literally."""
        assert format_line("url", "a=b,c") == "url = a=b,c\n"

    def test_format_empty_value(self):
        """Test an empty value still produces a data line."""
        assert format_line("Empty", "") == "Empty = \n"


class TestIsCommentOrBlank:
    """Test comment and blank line detection."""

    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "\n",
        "# comment",
        "   # indented comment",
        "// slash comment",
        "/* block comment start",
    ])
    def test_ignored_lines(self, line):
        """Test blank lines and every comment prefix are ignored."""
        assert is_comment_or_blank(line) is True

    @pytest.mark.parametrize("line", [
        "A = 1",
        "key=value # not a comment",
        "/ = slash key",
        "NoEqualsHere",
    ])
    def test_data_lines(self, line):
        """Test anything else counts as a data line."""
        assert is_comment_or_blank(line) is False


class TestParseLine:
    """Test line parsing."""

    def test_parse_simple(self):
        """Test a well-formed line."""
        assert parse_line("A = 1\n") == Property("A", "1")

    def test_parse_trims_whitespace(self):
        """Test surrounding whitespace on both sides is dropped."""
        prop = parse_line("  X   =   hello world  \n")
        assert prop.key == "X"
        assert prop.value == "hello world"

    def test_parse_splits_on_first_separator(self):
        """Test only the first '=' separates key from value."""
        prop = parse_line("MongoServer = mongodb://h1,h2/?replicaSet=mytest")
        assert prop.key == "MongoServer"
        assert prop.value == "mongodb://h1,h2/?replicaSet=mytest"

    def test_parse_empty_value(self):
        """Test a line with nothing after the separator."""
        assert parse_line("Empty =") == Property("Empty", "")

    def test_parse_crlf(self):
        """Test Windows line endings are trimmed."""
        assert parse_line("A = 1\r\n") == Property("A", "1")

    def test_parse_comment_returns_none(self):
        """Test comment and blank lines yield nothing."""
        assert parse_line("# A = 1") is None
        assert parse_line("   ") is None

    def test_parse_missing_separator(self):
        """Test a data line without '=' raises a recoverable error."""
        with pytest.raises(ParsingError) as exc_info:
            parse_line("  NoEqualsHere \n", line_number=3)

        error = exc_info.value
        assert error.line == "NoEqualsHere"
        assert error.line_number == 3
        assert "missing '=' separator" in str(error)


class TestCompoundValues:
    """Test comma-joined list values."""

    def test_join(self):
        """Test list elements are joined with ','."""
        assert join_values(["Debug", "Info", "Warn"]) == "Debug,Info,Warn"

    def test_join_empty(self):
        """Test an empty list joins to an empty string."""
        assert join_values([]) == ""

    def test_split(self):
        """Test elements are not trimmed."""
        assert split_values("a, b ,c") == ["a", " b ", "c"]

    def test_split_empty(self):
        """Test an empty value splits to a single empty element."""
        assert split_values("") == [""]


class TestModels:
    """Test codec result models."""

    def test_property_rejects_newline(self):
        """Test a property cannot contain the line terminator."""
        with pytest.raises(ValidationError):
            Property("key", "two\nlines")

    def test_property_str(self):
        """Test a property renders like a data line."""
        assert str(Property("A", "1")) == "A = 1"

    def test_line_error_from_parsing_error(self):
        """Test conversion from the codec's exception."""
        error = ParsingError(line="bad", line_number=7, reason="missing '=' separator")
        line_error = LineError.from_parsing_error(error)

        assert line_error.line_number == 7
        assert line_error.line == "bad"
        assert str(line_error) == "line 7: missing '=' separator: 'bad'"

    def test_load_report(self):
        """Test report counters and dictionary form."""
        report = LoadReport(
            loaded=2,
            skipped=1,
            errors=(LineError(line_number=4, line="bad", reason="missing '=' separator"),),
        )

        assert report.ok is False
        assert report.lines == 4
        assert report.to_dict()["errors"][0]["line_number"] == 4
        assert LoadReport().ok is True

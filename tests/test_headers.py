import pytest

from gatus_snitcher.errors import ConfigError, HeaderParseError
from gatus_snitcher.headers import (
    parse_extra_headers,
    parse_json_headers,
    parse_line_headers,
    redact_headers,
)


class TestJsonHeaders:
    def test_object_values_are_stringified(self):
        assert parse_json_headers('{"A":"1","B":2}') == {"A": "1", "B": "2"}

    def test_null_values_are_skipped(self):
        assert parse_json_headers('{"A": null, "B": "x"}') == {"B": "x"}

    def test_scalar_rendering(self):
        headers = parse_json_headers('{"t": true, "f": false, "n": 1.5, "i": 3.0}')
        assert headers == {"t": "true", "f": "false", "n": "1.5", "i": "3"}

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", '"text"', "42"])
    def test_non_objects_return_none(self, raw):
        assert parse_json_headers(raw) is None


class TestLineHeaders:
    def test_key_value_lines(self):
        assert parse_line_headers("A: 1\nB: 2") == {"A": "1", "B": "2"}

    def test_crlf_and_blank_lines(self):
        assert parse_line_headers("A: 1\r\n\r\n  B:2  ") == {"A": "1", "B": "2"}

    def test_value_keeps_later_colons(self):
        assert parse_line_headers("X-Url: https://a:8080/x") == {"X-Url": "https://a:8080/x"}

    def test_missing_colon_names_the_line(self):
        with pytest.raises(HeaderParseError) as exc_info:
            parse_line_headers("A: 1\nbadline")
        assert exc_info.value.line == "badline"
        assert '"badline"' in str(exc_info.value)

    def test_leading_colon_is_rejected(self):
        with pytest.raises(HeaderParseError):
            parse_line_headers(": value")

    def test_indented_leading_colon_is_rejected(self):
        with pytest.raises(HeaderParseError) as exc_info:
            parse_line_headers("A: 1\n  :x")
        assert exc_info.value.line == "  :x"


class TestExtraHeaders:
    def test_empty_input(self):
        assert parse_extra_headers("") == {}
        assert parse_extra_headers("   \n ") == {}

    def test_json_is_preferred(self):
        assert parse_extra_headers('{"A":"1","B":2}') == {"A": "1", "B": "2"}

    def test_line_fallback(self):
        assert parse_extra_headers("A: 1\nB: 2") == {"A": "1", "B": "2"}

    def test_json_values_with_colons_are_not_line_parsed(self):
        assert parse_extra_headers('{"A": "b: c"}') == {"A": "b: c"}

    def test_bad_line_is_a_config_error(self):
        with pytest.raises(ConfigError):
            parse_extra_headers("badline")


def test_redact_headers():
    headers = {"Authorization": "Bearer xyz", "X-Empty": ""}
    assert redact_headers(headers) == {"Authorization": "REDACTED", "X-Empty": ""}

"""Tests for request assembly helpers."""

import re

import pytest
from pydantic import BaseModel

from fetchkit._internal.request import (
    apply_base_url,
    apply_params,
    encode_json_body,
    encode_primitive_body,
    is_json_body,
    is_primitive_body,
    parse_json_text,
    read_cookie,
)
from fetchkit.models import Blob, FormData


class TestIsJsonBody:
    """Tests for is_json_body()."""

    @pytest.mark.parametrize("body", [{"a": 1}, {}, [1], (1, 2), [0]])
    def test_json_bodies(self, body):
        """Should encode mappings and sequences."""
        assert is_json_body(body) is True

    @pytest.mark.parametrize(
        "body", [None, "text", b"bytes", bytearray(b"x"), memoryview(b"x"), 0, 5, 1.5, True]
    )
    def test_passthrough_bodies(self, body):
        """Should leave text, bytes, primitives and None alone."""
        assert is_json_body(body) is False

    def test_form_data(self):
        """Should leave objects with append() alone."""
        assert is_json_body(FormData()) is False

    def test_blob(self):
        """Should leave objects with text() alone."""
        assert is_json_body(Blob(content=b"x")) is False

    def test_non_callable_markers_ignored(self):
        """Should only treat callable markers as capabilities."""

        class Record:
            append = "not callable"
            text = None

        assert is_json_body(Record()) is True


class TestEncodeJsonBody:
    """Tests for encode_json_body()."""

    def test_compact_separators(self):
        """Should match JSON.stringify output."""
        assert encode_json_body({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_pydantic_model(self):
        """Should dump pydantic models in JSON mode."""

        class Item(BaseModel):
            name: str
            qty: int = 1

        assert encode_json_body(Item(name="x")) == '{"name":"x","qty":1}'

    def test_unserializable_raises(self):
        """Should propagate TypeError for unsupported values."""
        with pytest.raises(TypeError):
            encode_json_body({"s": {1, 2}})

    def test_circular_raises(self):
        """Should propagate ValueError for circular structures."""
        data: dict = {}
        data["self"] = data
        with pytest.raises(ValueError):
            encode_json_body(data)


class TestReadCookie:
    """Tests for read_cookie()."""

    def test_first_cookie(self):
        """Should match a cookie at the start of the string."""
        assert read_cookie("token=abc; other=1", "token") == "abc"

    def test_later_cookie(self):
        """Should match a cookie after a separator."""
        assert read_cookie("a=1; token=abc", "token") == "abc"

    def test_suffix_name_not_matched(self):
        """Should not match a cookie whose name merely ends with the name."""
        assert read_cookie("xtoken=abc", "token") is None

    def test_url_decodes(self):
        """Should URL-decode the value."""
        assert read_cookie("t=a%2Fb%20c", "t") == "a/b c"

    def test_empty_value(self):
        """Should return an empty string for an empty cookie."""
        assert read_cookie("t=; u=1", "t") == ""

    def test_callable_source(self):
        """Should call a callable cookie source."""
        assert read_cookie(lambda: "t=v", "t") == "v"

    def test_no_source(self):
        """Should return None without a cookie source."""
        assert read_cookie(None, "t") is None

    def test_invalid_pattern_raises(self):
        """Should surface pattern errors to the caller."""
        with pytest.raises(re.error):
            read_cookie("a=1", "bad(")


class TestApplyBaseUrl:
    """Tests for apply_base_url()."""

    def test_leading_slash_stripped(self):
        """Should strip one leading slash."""
        assert apply_base_url("/posts", "https://api.example") == "https://api.example/posts"

    def test_relative_path(self):
        """Should insert a slash for relative paths."""
        assert apply_base_url("posts", "https://api.example") == "https://api.example/posts"

    def test_only_one_slash_stripped(self):
        """Should strip at most one leading slash."""
        assert apply_base_url("/a", "http://h/") == "http://h//a"

    def test_absolute_url_untouched(self):
        """Should leave absolute URLs alone."""
        assert apply_base_url("http://other/x", "http://h") == "http://other/x"

    def test_double_slash_anywhere(self):
        """Should leave any URL containing // alone."""
        assert apply_base_url("/a//b", "http://h") == "/a//b"

    def test_protocol_relative(self):
        """Should leave protocol-relative URLs alone."""
        assert apply_base_url("//cdn/x", "http://h") == "//cdn/x"

    def test_empty_url(self):
        """Should resolve an empty URL to the base URL with a slash."""
        assert apply_base_url("", "http://h") == "http://h/"

    def test_no_base_url(self):
        """Should return the URL unchanged without a base URL."""
        assert apply_base_url("/x", None) == "/x"

    def test_backslashes_in_base_url_literal(self):
        """Should insert the base URL literally."""
        assert apply_base_url("x", r"http://h\1") == "http://h\\1/x"


class TestApplyParams:
    """Tests for apply_params()."""

    def test_question_mark(self):
        """Should start a query string."""
        assert apply_params("/search", {"q": "x"}) == "/search?q=x"

    def test_ampersand(self):
        """Should extend an existing query string."""
        assert apply_params("/search?p=1", {"q": "x"}) == "/search?p=1&q=x"

    def test_form_encoding(self):
        """Should form-encode spaces and reserved characters."""
        assert apply_params("/s", {"q": "a b&c"}) == "/s?q=a+b%26c"

    def test_multiple_values(self):
        """Should repeat keys for list values."""
        assert apply_params("/s", {"tag": ["a", "b"]}) == "/s?tag=a&tag=b"

    def test_serializer(self):
        """Should use a custom serializer."""
        assert apply_params("/s", {"a": 1}, lambda p: "x=y") == "/s?x=y"

    def test_no_params(self):
        """Should leave the URL unchanged without params."""
        assert apply_params("/s", None) == "/s"


class TestPrimitiveBodies:
    """Tests for number and boolean payloads."""

    @pytest.mark.parametrize("body", [0, 5, -1.5, True, False])
    def test_is_primitive(self, body):
        """Should treat numbers and booleans as primitives."""
        assert is_primitive_body(body) is True

    @pytest.mark.parametrize("body", [None, "5", {"a": 1}, [1]])
    def test_not_primitive(self, body):
        """Should not treat text or containers as primitives."""
        assert is_primitive_body(body) is False

    @pytest.mark.parametrize(
        ("body", "expected"), [(5, "5"), (1.5, "1.5"), (True, "true"), (False, "false")]
    )
    def test_encoded_as_text(self, body, expected):
        """Should render primitives like String()."""
        assert encode_primitive_body(body) == expected


class TestParseJsonText:
    """Tests for parse_json_text()."""

    def test_parses_json(self):
        """Should parse regular JSON text."""
        assert parse_json_text('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"a": NaN}'])
    def test_rejects_non_standard_constants(self, text):
        """Should reject constants outside strict JSON."""
        with pytest.raises(ValueError):
            parse_json_text(text)

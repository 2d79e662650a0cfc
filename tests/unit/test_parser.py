"""Unit tests for looseurl.core.parser module."""

import pytest

from looseurl.core.parser import Components, parse_components


class TestParseComponents:
    """Tests for parse_components()."""

    def test_full_url(self):
        """Test splitting every component."""
        result = parse_components(
            "http://www.example.com:404/path/to/nowhere?query=string"
        )
        assert result == Components(
            protocol="http",
            host="www.example.com",
            port="404",
            path="/path/to/nowhere",
            query="query=string",
        )

    def test_without_protocol(self):
        """Test that a bare host has no protocol."""
        result = parse_components("example.com")
        assert result == Components(host="example.com")

    @pytest.mark.parametrize("raw", ["", "http://", "git+ssh://"])
    def test_nothing_after_protocol(self, raw):
        """Test that empty input yields empty components."""
        result = parse_components(raw)
        assert result.is_empty()

    def test_embedded_protocol_in_path(self):
        """Test that a URL nested in the path is not split again."""
        result = parse_components(
            "https://img.example.com/images/200x200/"
            "https://backend.example.com/img/abcd.jpg"
        )
        assert result.protocol == "https"
        assert result.host == "img.example.com"
        assert result.port is None
        assert result.path == "/images/200x200/https://backend.example.com/img/abcd.jpg"
        assert result.query is None

    def test_embedded_protocol_in_query(self):
        """Test that a URL nested in the query stays in the query."""
        result = parse_components(
            "https://example.com/redirect?to=https://other.example.com/x"
        )
        assert result.host == "example.com"
        assert result.path == "/redirect"
        assert result.query == "to=https://other.example.com/x"

    @pytest.mark.parametrize(
        "raw, protocol",
        [
            ("git+ssh://example.com/repo", "git+ssh"),
            ("coap.tcp://example.com", "coap.tcp"),
            ("x-custom://example.com", "x-custom"),
        ],
    )
    def test_non_standard_protocols(self, raw, protocol):
        """Test that protocol characters are not validated."""
        result = parse_components(raw)
        assert result.protocol == protocol
        assert result.host == "example.com"

    def test_query_without_path(self):
        """Test query extraction when there is no slash."""
        result = parse_components("example.com?a=b")
        assert result.host == "example.com"
        assert result.path is None
        assert result.query == "a=b"

    def test_port_before_query(self):
        """Test that the port ends at the query separator."""
        result = parse_components("example.com:8080?a=b")
        assert result.host == "example.com"
        assert result.port == "8080"
        assert result.query == "a=b"

    def test_query_split_on_first_question_mark(self):
        """Test that later question marks belong to the query."""
        result = parse_components("example.com/a?b=1?c=2")
        assert result.path == "/a"
        assert result.query == "b=1?c=2"

    @pytest.mark.parametrize(
        "raw, port",
        [
            ("example.com:8080/x", "8080"),
            ("example.com:/x", None),
            ("example.com:", None),
            ("localhost:abc/x", "abc"),
            ("example.com:1:2", "1"),
        ],
    )
    def test_port_text(self, raw, port):
        """Test that port text is extracted without conversion."""
        assert parse_components(raw).port == port

    def test_empty_query_is_absent(self):
        """Test that a trailing question mark gives no query."""
        result = parse_components("example.com/path?")
        assert result.path == "/path"
        assert result.query is None

    def test_path_without_host(self):
        """Test that a lone path has no host."""
        result = parse_components("/path/only")
        assert result.host is None
        assert result.path == "/path/only"
        assert not result.is_empty()

    def test_fragment_is_not_split(self):
        """Test that fragments stay part of the path."""
        assert parse_components("example.com/a#b").path == "/a#b"

import pytest

from looseurl import URL


@pytest.fixture
def make_url():
    """Fixture returning a parser that fails the test on unparseable input."""

    def _make_url(raw):
        url = URL.parse(raw)
        if url is None:
            pytest.fail(f"Could not parse {raw!r}")
        return url

    return _make_url

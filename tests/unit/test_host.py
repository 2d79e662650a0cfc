"""Unit tests for looseurl.core.host module."""

import pytest

from looseurl.core.host import (
    HostParts,
    domain,
    join_host,
    labels,
    sld,
    split_host,
    subdomain,
    tld,
)


@pytest.mark.parametrize(
    "host, expected_subdomain, expected_sld, expected_tld, expected_domain",
    [
        ("www.example.com", "www", "example", "com", "example.com"),
        ("example.com", None, "example", "com", "example.com"),
        ("localhost", None, "localhost", None, "localhost"),
        ("a.b.example.co", "a.b", "example", "co", "example.co"),
        ("example.example.com", "example", "example", "com", "example.com"),
        (".example.com", "", "example", "com", "example.com"),
        ("", None, "", None, ""),
    ],
)
def test_decomposition(
    host, expected_subdomain, expected_sld, expected_tld, expected_domain
):
    """Test subdomain, SLD, TLD and domain of a host."""
    assert subdomain(host) == expected_subdomain
    assert sld(host) == expected_sld
    assert tld(host) == expected_tld
    assert domain(host) == expected_domain


def test_labels_keep_empty_parts():
    """Test that empty labels are preserved."""
    assert labels("a..b.") == ["a", "", "b", ""]


@pytest.mark.parametrize(
    "host",
    ["www.example.com", "localhost", "a.b.c.d.example.org", ".example.com"],
)
def test_split_and_join_reconstruct_host(host):
    """Test that joining the decomposed parts gives the host back."""
    assert join_host(split_host(host)) == host


class TestJoinHost:
    """Tests for join_host()."""

    def test_compact_drops_missing_parts(self):
        """Test that missing parts are skipped by default."""
        assert join_host(HostParts(None, "example", "com")) == "example.com"
        assert join_host(HostParts(None, "localhost", None)) == "localhost"

    def test_strict_requires_all_parts(self):
        """Test that compact=False refuses missing parts."""
        assert join_host(HostParts("www", "example", "com"), compact=False) == (
            "www.example.com"
        )
        with pytest.raises(ValueError, match="subdomain"):
            join_host(HostParts(None, "example", "com"), compact=False)

    def test_split_host_returns_named_parts(self):
        """Test that split_host() exposes parts by name."""
        parts = split_host("www.example.com")
        assert parts.subdomain == "www"
        assert parts.sld == "example"
        assert parts.tld == "com"

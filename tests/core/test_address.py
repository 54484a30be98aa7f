"""Tests for address normalization helpers."""

import pytest

from service_monitor.core.address import ensure_protocol, format_server_print, has_protocol, probe_host

__all__ = []


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("http://a.com", "a.com"),
        ("https://a.com", "a.com"),
        ("a.com", "a.com"),
        ("https://a.com/health", "a.com/health"),
    ],
)
def test_format_server_print_strips_scheme(address: str, expected: str) -> None:
    """format_server_print should only remove a leading http(s) scheme."""
    assert format_server_print(address) == expected


def test_ensure_protocol_adds_default_scheme() -> None:
    """Bare hosts should get http:// prepended."""
    assert ensure_protocol("a.com") == "http://a.com"


def test_ensure_protocol_keeps_existing_scheme() -> None:
    """Addresses with a scheme should be returned unchanged."""
    assert ensure_protocol("https://a.com") == "https://a.com"
    assert ensure_protocol("http://a.com") == "http://a.com"


def test_has_protocol() -> None:
    """Only http and https count as schemes."""
    assert has_protocol("https://a.com")
    assert not has_protocol("a.com")
    assert not has_protocol("ftp://a.com")


def test_probe_host_reduces_urls_to_hostname() -> None:
    """Ping should target the host of a URL, without port or path."""
    assert probe_host("https://a.com:8443/status") == "a.com"
    assert probe_host("10.0.0.1") == "10.0.0.1"

"""Address normalization helpers."""

from urllib.parse import urlsplit

__all__ = ["DEFAULT_SCHEME", "ensure_protocol", "format_server_print", "has_protocol", "probe_host"]

DEFAULT_SCHEME = "http"
_KNOWN_SCHEMES = ("http://", "https://")


def has_protocol(address: str) -> bool:
    """Return True if the address carries an http(s) scheme."""
    return address.startswith(_KNOWN_SCHEMES)


def ensure_protocol(address: str) -> str:
    """Prefix the default scheme when the address has none.

    Examples:
        >>> ensure_protocol("a.com")
        'http://a.com'
        >>> ensure_protocol("https://a.com")
        'https://a.com'
    """
    if has_protocol(address):
        return address
    return f"{DEFAULT_SCHEME}://{address}"


def format_server_print(address: str) -> str:
    """Strip a leading http(s) scheme for display.

    Examples:
        >>> format_server_print("https://a.com")
        'a.com'
        >>> format_server_print("a.com")
        'a.com'
    """
    for prefix in _KNOWN_SCHEMES:
        if address.startswith(prefix):
            return address[len(prefix) :]
    return address


def probe_host(address: str) -> str:
    """Return the host part to send echo requests to.

    URLs are reduced to their hostname; bare hosts are returned unchanged.
    """
    if not has_protocol(address):
        return address
    return urlsplit(address).hostname or format_server_print(address)

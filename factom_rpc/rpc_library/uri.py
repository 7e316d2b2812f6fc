# factom_rpc/rpc_library/uri.py
"""
Endpoint URI normalization.

A host such as ``http://localhost:8088`` or ``https://api.factomd.net/v2`` is
turned into the URI the daemon actually serves. The required path always
replaces whatever path the host carried, so normalizing twice is a no-op.
"""
import httpx

from factom_rpc.errors import ConfigurationError

API_PATH = "/v2"
DEBUG_PATH = "/debug"

_ALLOWED_SCHEMES = ("http", "https")


def normalize(host: str, required_path: str) -> httpx.URL:
    """Parses ``host`` and returns it with its path set to ``required_path``.

    Raises:
        ConfigurationError: if ``host`` is not an absolute http(s) URL.
    """
    if not isinstance(host, str) or not host.strip():
        raise ConfigurationError("Endpoint host must be a non-empty string", host)
    if not required_path.startswith("/"):
        raise ConfigurationError(f"Endpoint path must start with '/': {required_path!r}", required_path)

    try:
        url = httpx.URL(host.strip())
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid endpoint host {host!r}: {e}", host) from e

    if url.scheme not in _ALLOWED_SCHEMES:
        raise ConfigurationError(
            f"Endpoint host {host!r} must start with http:// or https://", host
        )
    if not url.host:
        raise ConfigurationError(f"Endpoint host {host!r} has no hostname", host)

    return url.copy_with(path=required_path)


def api_uri(host: str) -> httpx.URL:
    return normalize(host, API_PATH)


def debug_uri(host: str) -> httpx.URL:
    return normalize(host, DEBUG_PATH)

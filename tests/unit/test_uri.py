# tests/unit/test_uri.py
"""
Unit tests for endpoint URI normalization.
"""
import httpx
import pytest

from factom_rpc.errors import ConfigurationError
from factom_rpc.rpc_library.uri import api_uri, debug_uri, normalize


class TestNormalize:

    @pytest.mark.parametrize("host, path, expected", [
        ("http://host", "/v2", "http://host/v2"),
        ("http://host/v2", "/v2", "http://host/v2"),
        ("http://host", "/debug", "http://host/debug"),
        ("http://localhost:8088", "/v2", "http://localhost:8088/v2"),
        ("https://api.factomd.net/", "/v2", "https://api.factomd.net/v2"),
    ])
    def test_scenarios(self, host, path, expected):
        assert str(normalize(host, path)) == expected

    def test_existing_path_is_replaced_not_appended(self):
        uri = normalize("http://host/some/other/path", "/v2")
        assert uri.path == "/v2"

    def test_path_equals_required_path(self):
        for host in ["http://a", "http://a:1234", "https://b.example.com/x/y"]:
            assert normalize(host, "/debug").path == "/debug"

    def test_idempotent(self):
        for host in ["http://host", "http://host/v2", "https://host:8443/foo"]:
            once = normalize(host, "/v2")
            assert normalize(str(once), "/v2") == once

    def test_same_result_with_or_without_path(self):
        assert normalize("http://h/v2", "/v2") == normalize("http://h", "/v2")

    def test_returns_httpx_url(self):
        assert isinstance(normalize("http://host", "/v2"), httpx.URL)

    @pytest.mark.parametrize("host", [
        "localhost:8088",
        "api.factomd.net",
        "http://",
        "ftp://host",
        "",
        "   ",
        "http://host:notaport",
    ])
    def test_bad_hosts_fail(self, host):
        with pytest.raises(ConfigurationError):
            normalize(host, "/v2")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize("not a url", "/v2")

    def test_relative_required_path_rejected(self):
        with pytest.raises(ConfigurationError):
            normalize("http://host", "v2")


class TestNamedNormalizers:

    def test_api_uri(self):
        assert str(api_uri("http://localhost:8089")) == "http://localhost:8089/v2"

    def test_debug_uri_overrides_api_path(self):
        assert str(debug_uri("http://localhost:8088/v2")) == "http://localhost:8088/debug"

"""Tests for view and delete URL composition."""

import pytest
from privatebin_cli.config import ServerConfig
from privatebin_cli.urls import compose_urls, parse_paste_url


class TestComposeUrls:
    """Test building the user-facing URLs."""

    def test_reference_example(self) -> None:
        """Default https port is omitted from both URLs."""
        base = ServerConfig(host="example.org", protocol="https", port=443, path="/").base_url
        urls = compose_urls(base, "abc123", "Zm9v", "xyz", burn_after_reading=False)

        assert urls.view_url == "https://example.org/?abc123#Zm9v"
        assert urls.delete_url == "https://example.org/?pasteid=abc123&deletetoken=xyz"
        assert urls.has_delete_url()

    def test_burn_after_reading_omits_delete_url(self) -> None:
        """No delete URL for burn-after-reading, even with a token."""
        urls = compose_urls("https://example.org/", "abc123", "Zm9v", "xyz", burn_after_reading=True)

        assert urls.view_url == "https://example.org/?abc123#Zm9v"
        assert urls.delete_url is None
        assert not urls.has_delete_url()

    def test_missing_delete_token(self) -> None:
        urls = compose_urls("https://example.org/", "abc123", "Zm9v", None, burn_after_reading=False)
        assert urls.delete_url is None

    def test_key_is_in_fragment_only(self) -> None:
        urls = compose_urls("https://example.org/", "abc123", "Zm9v", "xyz", burn_after_reading=False)
        before, _, fragment = urls.view_url.partition("#")

        assert fragment == "Zm9v"
        assert "Zm9v" not in before
        assert "Zm9v" not in urls.delete_url

    @pytest.mark.parametrize(
        "protocol,port,expected",
        [
            ("http", 80, "http://example.org/bin/"),
            ("http", 8080, "http://example.org:8080/bin/"),
            ("https", 443, "https://example.org/bin/"),
            ("https", 80, "https://example.org:80/bin/"),
            ("http", 443, "http://example.org:443/bin/"),
        ],
    )
    def test_port_normalization(self, protocol: str, port: int, expected: str) -> None:
        config = ServerConfig(host="example.org", protocol=protocol, port=port, path="/bin/")
        assert config.base_url == expected


class TestParsePasteUrl:
    """Test splitting view URLs."""

    def test_round_trip(self) -> None:
        urls = compose_urls("https://example.org:8443/bin/", "abc123", "AAEC+/8=", None, True)
        assert parse_paste_url(urls.view_url) == ("https://example.org:8443/bin/", "abc123", "AAEC+/8=")

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.org/#key",
            "https://example.org/?abc123",
            "ftp://example.org/?abc123#key",
            "not a url",
        ],
    )
    def test_invalid(self, url: str) -> None:
        with pytest.raises(ValueError):
            parse_paste_url(url)

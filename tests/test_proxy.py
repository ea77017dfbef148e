import pytest

from dirble.proxy import (
    BURP_DEFAULT_PROXY,
    ProxySource,
    proxy_advisory,
    resolve_credentials,
    resolve_proxy,
)


class TestResolveProxy:
    def test_unset(self):
        settings = resolve_proxy()
        assert settings.enabled is False
        assert settings.address == ""
        assert settings.source is ProxySource.UNSET

    def test_explicit(self):
        settings = resolve_proxy(proxy="http://proxy:3128")
        assert settings.enabled is True
        assert settings.address == "http://proxy:3128"
        assert settings.source is ProxySource.EXPLICIT

    def test_burp(self):
        settings = resolve_proxy(burp=True)
        assert settings.enabled is True
        assert settings.address == BURP_DEFAULT_PROXY

    def test_disabled(self):
        settings = resolve_proxy(no_proxy=True)
        assert settings.enabled is True
        assert settings.address == ""
        assert settings.source is ProxySource.DISABLED

    def test_explicit_beats_burp_and_disable(self):
        settings = resolve_proxy(proxy="http://proxy:3128", burp=True, no_proxy=True)
        assert settings.source is ProxySource.EXPLICIT

    def test_burp_beats_disable(self):
        assert resolve_proxy(burp=True, no_proxy=True).source is ProxySource.BURP


class TestAdvisory:
    def test_explicit_burp_address(self):
        message = proxy_advisory(resolve_proxy(proxy=BURP_DEFAULT_PROXY))
        assert "--burp" in message

    def test_other_address(self):
        assert proxy_advisory(resolve_proxy(proxy="http://localhost:8081")) is None

    def test_burp_flag_itself(self):
        assert proxy_advisory(resolve_proxy(burp=True)) is None

    def test_advisory_does_not_change_value(self):
        settings = resolve_proxy(proxy=BURP_DEFAULT_PROXY)
        proxy_advisory(settings)
        assert settings.address == BURP_DEFAULT_PROXY
        assert settings.source is ProxySource.EXPLICIT


class TestCredentials:
    def test_pair_forwarded(self):
        assert resolve_credentials("bob", "hunter2") == ("bob", "hunter2")

    def test_neither(self):
        assert resolve_credentials() == (None, None)

    @pytest.mark.parametrize("username,password", [("bob", None), (None, "hunter2")])
    def test_half_pair_forwarded_unchanged(self, username, password):
        assert resolve_credentials(username, password) == (username, password)

"""
Tests for the transport client and configuration.
"""

from __future__ import annotations

import pytest
import requests

from gatewayctl.client import GatewayClient
from gatewayctl.config import (
    AIM_LIVE_URL,
    AIM_TEST_URL,
    ARB_LIVE_URL,
    ARB_TEST_URL,
    GatewayConfig,
)
from gatewayctl.exceptions import GatewayError, GatewayTransportError
from gatewayctl.models import GatewayResponse


class TestGatewayClient:
    def test_post_returns_response(self, fake_session) -> None:
        fake_session.text = "1|1|1"
        client = GatewayClient("https://gw.example/post", timeout_s=3, session=fake_session)

        response = client.post("a=1&b=2", {"Content-Type": "application/x-www-form-urlencoded"})

        assert isinstance(response, GatewayResponse)
        assert response.endpoint == "https://gw.example/post"
        assert response.status_code == 200
        assert response.text == "1|1|1"
        assert response.elapsed_s >= 0

        call = fake_session.calls[0]
        assert call["data"] == b"a=1&b=2"
        assert call["timeout"] == 3
        assert call["verify"] is True
        assert call["headers"] == {"Content-Type": "application/x-www-form-urlencoded"}

    def test_body_sent_as_utf8(self, fake_session) -> None:
        client = GatewayClient("https://gw.example/post", session=fake_session)
        client.post("<name>Jürgen</name>")
        assert fake_session.calls[0]["data"] == "<name>Jürgen</name>".encode("utf-8")

    def test_no_retry_on_failure(self, fake_session) -> None:
        fake_session.exc = requests.ConnectionError("refused")
        client = GatewayClient("https://gw.example/post", session=fake_session)

        with pytest.raises(GatewayTransportError) as excinfo:
            client.post("a=1")

        assert len(fake_session.calls) == 1
        assert isinstance(excinfo.value, GatewayError)
        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    def test_http_error_status(self, fake_session) -> None:
        fake_session.status_code = 500
        client = GatewayClient("https://gw.example/post", session=fake_session)

        with pytest.raises(GatewayTransportError):
            client.post("a=1")

    def test_default_session(self) -> None:
        client = GatewayClient("https://gw.example/post")
        assert isinstance(client.session, requests.Session)
        assert client.endpoint == "https://gw.example/post"


class TestGatewayConfig:
    def test_defaults(self) -> None:
        config = GatewayConfig()

        assert config.debug is False
        assert config.mock is False
        assert config.verify_tls is True
        assert config.credentials() == {}

    @pytest.mark.parametrize(
        "gateway, sandbox, url",
        [
            ("aim", False, AIM_LIVE_URL),
            ("aim", True, AIM_TEST_URL),
            ("arb", False, ARB_LIVE_URL),
            ("arb", True, ARB_TEST_URL),
        ],
    )
    def test_get_url(self, gateway, sandbox, url) -> None:
        assert GatewayConfig().get_url(gateway, sandbox) == url

    def test_unknown_gateway(self) -> None:
        with pytest.raises(ValueError):
            GatewayConfig().get_url("cim", False)

    def test_credentials(self, config) -> None:
        assert config.credentials() == {"x_login": "api-login", "x_tran_key": "tran-key"}

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ANET_API_LOGIN", "env-login")
        monkeypatch.setenv("ANET_TRANSACTION_KEY", "env-key")
        monkeypatch.setenv("ANET_DEBUG", "true")
        monkeypatch.setenv("ANET_MOCK", "1")
        monkeypatch.setenv("ANET_TIMEOUT", "12.5")
        monkeypatch.setenv("ANET_VERIFY_TLS", "no")
        monkeypatch.setenv("ANET_AIM_TEST_URL", "https://sandbox.example/aim")

        config = GatewayConfig.from_env()

        assert config.api_login == "env-login"
        assert config.transaction_key == "env-key"
        assert config.debug is True
        assert config.mock is True
        assert config.timeout_s == 12.5
        assert config.verify_tls is False
        assert config.get_url("aim", True) == "https://sandbox.example/aim"
        assert config.get_url("arb", True) == ARB_TEST_URL

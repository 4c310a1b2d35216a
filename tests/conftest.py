from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from gatewayctl.config import GatewayConfig


class FakeResponse:
    """Stand-in for requests.Response with just what GatewayClient reads."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    """Records every POST instead of sending it."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.text = ""
        self.status_code = 200
        self.exc: Optional[Exception] = None

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return FakeResponse(self.text, self.status_code)

    @property
    def last_body(self) -> str:
        return self.calls[-1]["data"].decode("utf-8")


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(api_login="api-login", transaction_key="tran-key")

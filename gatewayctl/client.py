# =============================================================================
# GatewayClient - HTTP POST client for payment gateway endpoints
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose and noninfringement. In no event shall the
# authors or copyright holders be liable for any claim, damages or other
# liability, whether in an action of contract, tort or otherwise, arising from,
# out of or in connection with the software or the use or other dealings in the
# software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

import requests

from .exceptions import GatewayTransportError
from .models import GatewayResponse


logger = logging.getLogger(__name__)


class GatewayClient:
    """
    Minimal HTTP client that posts a pre-built body to a gateway endpoint.

    This client focuses on:
      - One POST per call, with caller supplied headers
      - A single timeout for the whole round trip
      - TLS verification toggle (sandbox endpoints sometimes need it off)

    It knows nothing about the body format. Gateway specific subclasses build
    form-encoded or XML bodies and decode the returned text.

    Each call posts exactly once; retrying is left to the caller.
    """

    def __init__(
        self,
        endpoint: str,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a GatewayClient.

        Args:
            endpoint:
                Full URL of the gateway endpoint, e.g.
                'https://test.authorize.net/gateway/transact.dll'.
            timeout_s:
                HTTP request timeout in seconds.
            verify_tls:
                Whether to verify the server certificate.
            session:
                Optional preconfigured requests.Session. If not provided, a new
                session is created.
        """
        self._endpoint = endpoint
        self.timeout_s = timeout_s
        self.verify_tls = verify_tls

        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        """
        Full endpoint URL the next request will be posted to.
        """
        return self._endpoint

    def post(self, body: str, headers: Optional[Dict[str, str]] = None) -> GatewayResponse:
        """
        Post `body` to the endpoint and return the raw response.

        Args:
            body: Already encoded request body.
            headers: Extra HTTP headers (e.g. Content-Type).

        Returns:
            GatewayResponse with the undecoded body text.

        Raises:
            GatewayTransportError:
                On connection problems, timeouts or HTTP error status codes.
        """
        url = self.endpoint
        logger.info("POST %s", url)

        start = time.monotonic()
        try:
            r = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers=headers or {},
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
            r.raise_for_status()
        except requests.RequestException as exc:
            logger.error("HTTP error posting to %s: %s", url, exc)
            raise GatewayTransportError(f"HTTP error posting to {url}: {exc}") from exc

        elapsed = time.monotonic() - start
        logger.debug("Request completed in %.2fs with status %s", elapsed, r.status_code)

        return GatewayResponse(
            endpoint=url,
            status_code=r.status_code,
            text=r.text,
            elapsed_s=elapsed,
        )

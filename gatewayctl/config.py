# =============================================================================
# GatewayClient Library – Configuration
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Literal

from dotenv import load_dotenv


Gateway = Literal["aim", "arb"]

AIM_LIVE_URL = "https://secure.authorize.net/gateway/transact.dll"
AIM_TEST_URL = "https://test.authorize.net/gateway/transact.dll"
ARB_LIVE_URL = "https://api.authorize.net/xml/v1/request.api"
ARB_TEST_URL = "https://apitest.authorize.net/xml/v1/request.api"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GatewayConfig:
    """
    Process level settings shared by the gateway clients.

    Attributes:
        api_login: Merchant API login id (sent as `x_login`).
        transaction_key: Merchant transaction key (sent as `x_tran_key`).
        debug: Sandbox mode; selects test endpoints and forces test requests.
        mock: Short-circuit the transport with a canned response.
        timeout_s: HTTP request timeout in seconds.
        verify_tls: Verify the gateway certificate.
        aim_live_url, aim_test_url: Delimited gateway endpoints.
        arb_live_url, arb_test_url: Recurring billing (XML) endpoints.
    """

    api_login: str = ""
    transaction_key: str = ""
    debug: bool = False
    mock: bool = False
    timeout_s: float = 30.0
    verify_tls: bool = True
    aim_live_url: str = AIM_LIVE_URL
    aim_test_url: str = AIM_TEST_URL
    arb_live_url: str = ARB_LIVE_URL
    arb_test_url: str = ARB_TEST_URL

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """
        Build a configuration from environment variables.

        A `.env` file in the working directory is loaded first if it exists.
        """
        load_dotenv()
        return cls(
            api_login=os.getenv("ANET_API_LOGIN", ""),
            transaction_key=os.getenv("ANET_TRANSACTION_KEY", ""),
            debug=_env_flag("ANET_DEBUG"),
            mock=_env_flag("ANET_MOCK"),
            timeout_s=float(os.getenv("ANET_TIMEOUT", "30")),
            verify_tls=_env_flag("ANET_VERIFY_TLS", "true"),
            aim_live_url=os.getenv("ANET_AIM_LIVE_URL", AIM_LIVE_URL),
            aim_test_url=os.getenv("ANET_AIM_TEST_URL", AIM_TEST_URL),
            arb_live_url=os.getenv("ANET_ARB_LIVE_URL", ARB_LIVE_URL),
            arb_test_url=os.getenv("ANET_ARB_TEST_URL", ARB_TEST_URL),
        )

    def get_url(self, gateway: Gateway, sandbox: bool) -> str:
        """
        Get the endpoint URL for a gateway.

        Args:
            gateway: "aim" for the delimited gateway, "arb" for recurring billing.
            sandbox: True for the test endpoint, False for production.

        Raises:
            ValueError: If the gateway name is unknown.
        """
        url_map = {
            ("aim", False): self.aim_live_url,
            ("aim", True): self.aim_test_url,
            ("arb", False): self.arb_live_url,
            ("arb", True): self.arb_test_url,
        }
        try:
            return url_map[(gateway, bool(sandbox))]
        except KeyError:
            raise ValueError(f"Unknown gateway={gateway!r}") from None

    def credentials(self) -> Dict[str, str]:
        """
        Credential fields to merge into a request field set.

        Empty values are left out so they never mask the defaults.
        """
        creds = {"x_login": self.api_login, "x_tran_key": self.transaction_key}
        return {k: v for k, v in creds.items() if v}

# =============================================================================
# AuthorizeNet - Delimited (AIM) payment gateway client
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Fernández Rodríguez
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
# @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from gatewayctl.client import GatewayClient
from gatewayctl.config import GatewayConfig
from gatewayctl.exceptions import GatewayError, GatewayProtocolError, GatewayTransportError

from .builder import AIM_DEFAULTS, Fields, build_form_body, force_test_fields, merge_fields
from .response import (
    DELIMITER,
    RESPONSE_CODE,
    RESPONSE_REASON_TEXT,
    TRANSACTION_ID,
    decode_code,
    decode_nice,
    field_value,
    is_approved,
    split_response,
)


logger = logging.getLogger(__name__)

# Approved sandbox authorization, as returned by the test endpoint.
MOCK_RESPONSE = "|".join((
    "1", "1", "1", "(TESTMODE) This transaction has been approved.",
    "000000", "P", "0", "", "", "75.00", "CC", "auth_only", "",
    "John", "Smith", "", "1234 West Main St.", "Some City", "CA", "12345",
    "US", "555-555-5555", "", "someone@somedomain.com",
    "", "", "", "", "", "", "", "",
    "", "", "", "", "",
    "F8B3EFAAD9428554CC27C140B7648EFA", "", "",
))


class AuthorizeNet(GatewayClient):
    """
    Client for the Authorize.net delimited (AIM) gateway.

    `AuthorizeNet` extends :class:`gatewayctl.client.GatewayClient` with the
    gateway field set, the form-encoded request body and the pipe-delimited
    response. One instance represents one transaction:

        >>> trxn = AuthorizeNet({"x_amount": "75.00", "x_card_num": "4007000000027"})
        >>> if trxn.execute() and trxn.is_approved():
        ...     print(trxn.transaction_id)

    `execute()` returns False only for transport failures. Whether the
    gateway approved the transaction is read from the accessors afterwards.
    """

    GATEWAY = "aim"
    HEADERS: Dict[str, str] = {"Content-Type": "application/x-www-form-urlencoded"}
    DEFAULTS: Fields = AIM_DEFAULTS
    MOCK_RESPONSE: str = MOCK_RESPONSE

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        config: Optional[GatewayConfig] = None,
        debug: Optional[bool] = None,
        mock: Optional[bool] = None,
        endpoint: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a transaction.

        Args:
            fields:
                Caller fields (`x_amount`, `x_card_num`, ...). They win over
                the gateway defaults and the configured credentials.
            config:
                Gateway settings; defaults to `GatewayConfig.from_env()`.
            debug:
                Sandbox mode. Overrides `config.debug` when given.
            mock:
                Use a canned response instead of calling the gateway.
                Overrides `config.mock` when given.
            endpoint:
                Explicit endpoint URL, bypassing the configured live/test URLs.
            session:
                Optional requests.Session used for the HTTP call.
        """
        self.config = config or GatewayConfig.from_env()
        super().__init__(
            endpoint=endpoint or "",
            timeout_s=self.config.timeout_s,
            verify_tls=self.config.verify_tls,
            session=session,
        )
        self.debug = self.config.debug if debug is None else debug
        self.mock = self.config.mock if mock is None else mock

        self.fields: Fields = merge_fields(self.DEFAULTS, self.config.credentials(), fields)
        self.error: Optional[GatewayError] = None
        self._response: List[str] = []

    @property
    def endpoint(self) -> str:
        """
        Endpoint for the next call: the explicit one if given, otherwise the
        configured test URL in debug mode and the live URL outside it.
        """
        if self._endpoint:
            return self._endpoint
        return self.config.get_url(self.GATEWAY, sandbox=self.debug)

    def _force_parameters(self) -> Fields:
        """
        Field set actually sent. Debug mode turns the request into an
        authorization-only test request; `self.fields` is left untouched.
        """
        if self.debug:
            return force_test_fields(self.fields)
        return dict(self.fields)

    def _build_body(self, fields: Fields) -> str:
        return build_form_body(fields)

    def _decode(self, body: str, mock: bool = False) -> None:
        # The canned reply is always pipe delimited, whatever x_delim_char says.
        delimiter = DELIMITER if mock else str(self.fields.get("x_delim_char") or DELIMITER)
        self._response = split_response(body, delimiter)
        logger.debug("Decoded %d response fields", len(self._response))

    def _reset(self) -> None:
        self.error = None
        self._response = []

    def execute(self) -> bool:
        """
        Run one request/response cycle.

        Returns:
            True if a response body was received (or mocked) and decoded,
            False when the request body could not be built or the transport
            failed. In that case `error` holds the GatewayProtocolError or
            GatewayTransportError and all accessors read as empty.
        """
        self._reset()
        fields = self._force_parameters()
        logger.debug("Sending fields: %s", ", ".join(fields))

        if self.mock:
            logger.info("Mock mode enabled, not contacting %s", self.endpoint)
            body = self.MOCK_RESPONSE
        else:
            try:
                request_body = self._build_body(fields)
            except GatewayProtocolError as exc:
                logger.error("Request body not built: %s", exc)
                self.error = exc
                return False
            try:
                body = self.post(request_body, self.HEADERS).text
            except GatewayTransportError as exc:
                logger.error("Transaction not sent: %s", exc)
                self.error = exc
                return False

        self._decode(body, mock=self.mock)
        return True

    # ---- Accessors ----

    @property
    def response_array(self) -> List[str]:
        """Raw positional response values of the last call."""
        return list(self._response)

    def nice_named_response(self) -> Dict[str, str]:
        """Last response keyed by human readable labels."""
        return decode_nice(self._response)

    def code_named_response(self) -> Dict[Union[str, int], str]:
        """Last response keyed by snake_case labels."""
        return decode_code(self._response)

    def _get_key(self, index: int) -> str:
        return field_value(self._response, index) or ""

    def is_approved(self) -> bool:
        return is_approved(self._response)

    @property
    def response_code(self) -> str:
        return self._get_key(RESPONSE_CODE)

    @property
    def response_reason(self) -> str:
        return self._get_key(RESPONSE_REASON_TEXT)

    @property
    def response_message(self) -> str:
        return self.response_reason

    @property
    def transaction_id(self) -> str:
        return self._get_key(TRANSACTION_ID)

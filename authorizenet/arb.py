# =============================================================================
# AuthorizeNetRecurring - Automated Recurring Billing (ARB) client
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

import hashlib
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import requests
from lxml import etree

from gatewayctl.config import GatewayConfig
from gatewayctl.exceptions import GatewayProtocolError

from .aim import AuthorizeNet
from .builder import (
    ARB_DEFAULTS,
    ARB_NAMESPACE,
    Fields,
    build_subscription_xml,
    subscription_from_fields,
)
from .models import SubscriptionMode, SubscriptionRequest


logger = logging.getLogger(__name__)

MOCK_XML_RESPONSE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<ARBCreateSubscriptionResponse xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
    f'xmlns="{ARB_NAMESPACE}">'
    "<refId>mock</refId>"
    "<messages>"
    "<resultCode>Ok</resultCode>"
    "<message><code>I00001</code><text>Successful.</text></message>"
    "</messages>"
    "<subscriptionId>100748</subscriptionId>"
    "</ARBCreateSubscriptionResponse>"
)


def parse_document(body: str) -> etree._Element:
    """
    Parse an ARB response body.

    The default namespace declaration is removed first; the schema URI is
    relative and would otherwise qualify every tag, breaking plain path
    lookups like `messages/resultCode`.

    Raises:
        GatewayProtocolError: If the body is not well-formed XML.
    """
    text = body.replace(f'xmlns="{ARB_NAMESPACE}"', "").lstrip("\ufeff").strip()
    # Replies are data only: no entity expansion, no network lookups.
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(text.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise GatewayProtocolError(f"Malformed ARB response: {exc}") from exc


class AuthorizeNetRecurring(AuthorizeNet):
    """
    Client for Authorize.net Automated Recurring Billing.

    The request mode is fixed when the client is built: a truthy
    `x_subsc_id` field means the subscription is being updated, otherwise a
    new one is created. `cancel()` switches to a cancellation request and
    there is no way back.

    Error code details: https://developer.authorize.net/tools/arberrorcodes/
    """

    GATEWAY = "arb"
    HEADERS: Dict[str, str] = {"Content-Type": "text/xml"}
    DEFAULTS: Fields = ARB_DEFAULTS
    MOCK_RESPONSE: str = MOCK_XML_RESPONSE

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        config: Optional[GatewayConfig] = None,
        debug: Optional[bool] = None,
        mock: Optional[bool] = None,
        endpoint: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(
            fields=fields,
            config=config,
            debug=debug,
            mock=mock,
            endpoint=endpoint,
            session=session,
        )
        self._document: Optional[etree._Element] = None
        self._mode = SubscriptionMode.UPDATE if self.fields.get("x_subsc_id") else SubscriptionMode.CREATE

    @property
    def mode(self) -> SubscriptionMode:
        """Current request mode."""
        return self._mode

    def cancel(self) -> None:
        """Turn this client into a subscription cancellation request."""
        self._mode = SubscriptionMode.CANCEL

    def subscription_request(self) -> SubscriptionRequest:
        """Request variant for the current mode."""
        return subscription_from_fields(self._mode, self._force_parameters())

    def _force_parameters(self) -> Fields:
        # No sandbox specific fields exist for recurring billing; debug mode
        # only selects the test endpoint.
        return dict(self.fields)

    def _build_body(self, fields: Fields) -> str:
        logger.info("Building %s subscription request", self._mode.value)
        return build_subscription_xml(subscription_from_fields(self._mode, fields))

    def _reset(self) -> None:
        super()._reset()
        self._document = None

    def _decode(self, body: str, mock: bool = False) -> None:
        try:
            self._document = parse_document(body)
        except GatewayProtocolError as exc:
            logger.warning("%s", exc)
            self.error = exc
            self._document = None

    # ---- Accessors ----

    def _find(self, path: str) -> str:
        if self._document is None:
            return ""
        return self._document.findtext(path, default="") or ""

    @property
    def document(self) -> Optional[etree._Element]:
        """Parsed response of the last call, None if missing or malformed."""
        return self._document

    @property
    def response_array(self) -> List[str]:
        """Always empty; recurring billing replies are XML without positional fields."""
        return []

    def nice_named_response(self) -> Dict[str, str]:
        """Always empty, see `response_array`."""
        return {}

    def code_named_response(self) -> Dict[Union[str, int], str]:
        """Always empty, see `response_array`."""
        return {}

    def is_approved(self) -> bool:
        return self.result_code == "Ok"

    @property
    def ref_id(self) -> str:
        return self._find("refId")

    @property
    def result_code(self) -> str:
        return self._find("messages/resultCode")

    @property
    def response_code(self) -> str:
        return self._find("messages/message/code")

    @property
    def response_message(self) -> str:
        return self._find("messages/message/text")

    @property
    def response_reason(self) -> str:
        return self.response_message

    @property
    def transaction_id(self) -> str:
        return self.subscription_id

    @property
    def subscription_id(self) -> str:
        return self._find("subscriptionId")

    def create_order_hash(self) -> str:
        """
        Short order token derived from the request fields and the response.

        Six uppercase hex characters of a SHA-1 digest over the `:`-joined
        field values followed by refId, message code and subscription id.
        """
        values = ("" if v is None or v is False else str(v) for v in self.fields.values())
        base = ":".join(values) + self.ref_id + self.response_code + self.subscription_id
        return hashlib.sha1(base.encode("utf-8")).hexdigest()[5:11].upper()

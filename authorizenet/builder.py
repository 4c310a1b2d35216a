# =============================================================================
# Authorize.net - Request builders
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
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

from gatewayctl.xmltree import Named, serialize, to_node

from .models import (
    CancelSubscription,
    CreateSubscription,
    CreditCard,
    MerchantAuthentication,
    PaymentSchedule,
    SubscriptionMode,
    SubscriptionRequest,
    UpdateSubscription,
)


logger = logging.getLogger(__name__)

ARB_NAMESPACE = "AnetApi/xml/v1/schema/AnetApiSchema.xsd"

Fields = Dict[str, Any]

AIM_DEFAULTS: Fields = {
    # These all must be provided by the caller
    "x_login": "",
    "x_tran_key": "",
    "x_first_name": "",
    "x_last_name": "",
    "x_address": "",
    "x_city": "",
    "x_state": "",
    "x_zip": "",
    "x_country": "",
    "x_email": "",
    "x_phone": "",
    "x_card_num": "",
    "x_amount": "",
    "x_description": "",
    "x_exp_date": "",
    "x_card_code": "",
    # These are typically not changed
    "x_version": "3.1",
    "x_delim_data": "TRUE",
    "x_delim_char": "|",
    "x_url": "FALSE",
    "x_type": "AUTH_CAPTURE",
    "x_test_request": "FALSE",
    "x_method": "CC",
    "x_relay_response": "FALSE",
    "x_encap_char": "",
}

ARB_DEFAULTS: Fields = {
    "x_login": "",
    "x_tran_key": "",
    "x_ref_id": "",
    "x_subsc_id": None,
    "x_subsc_name": "",
    "x_length": "",
    "x_unit": "",
    "x_start_date": "",
    "x_total_occurrences": "",
    "x_trial_occurrences": "",
    "x_trial_amount": "",
    "x_first_name": "",
    "x_last_name": "",
    "x_card_num": "",
    "x_amount": "",
    "x_exp_date": "",
}

ROOT_ELEMENTS = {
    SubscriptionMode.CREATE: "ARBCreateSubscriptionRequest",
    SubscriptionMode.UPDATE: "ARBUpdateSubscriptionRequest",
    SubscriptionMode.CANCEL: "ARBCancelSubscriptionRequest",
}


def merge_fields(defaults: Mapping[str, Any], *overrides: Optional[Mapping[str, Any]]) -> Fields:
    """
    Merge field sets left to right; later keys win, default order is kept.
    """
    fields: Fields = dict(defaults)
    for override in overrides:
        if override:
            fields.update(override)
    return fields


def force_test_fields(fields: Mapping[str, Any]) -> Fields:
    """
    Copy of `fields` turned into an authorization-only test request.
    """
    forced = dict(fields)
    forced["x_type"] = "AUTH_ONLY"
    forced["x_test_request"] = "TRUE"
    return forced


def build_form_body(fields: Mapping[str, Any]) -> str:
    """
    Form-encode a flat field set (`key=value&key=value`).

    None renders as an empty value.
    """
    return urlencode([(k, "" if v is None else v) for k, v in fields.items()])


def _text(fields: Mapping[str, Any], key: str) -> str:
    value = fields.get(key)
    if value is None or value is False:
        return ""
    return str(value)


def subscription_from_fields(mode: SubscriptionMode, fields: Mapping[str, Any]) -> SubscriptionRequest:
    """
    Build the request variant for `mode` out of a recurring field set.
    """
    auth = MerchantAuthentication(
        name=_text(fields, "x_login"),
        transaction_key=_text(fields, "x_tran_key"),
    )
    ref_id = _text(fields, "x_ref_id")

    if mode is SubscriptionMode.CREATE:
        return CreateSubscription(
            auth=auth,
            ref_id=ref_id,
            name=_text(fields, "x_subsc_name"),
            schedule=PaymentSchedule(
                length=_text(fields, "x_length"),
                unit=_text(fields, "x_unit"),
                start_date=_text(fields, "x_start_date"),
                total_occurrences=_text(fields, "x_total_occurrences"),
                trial_occurrences=_text(fields, "x_trial_occurrences"),
            ),
            amount=_text(fields, "x_amount"),
            trial_amount=_text(fields, "x_trial_amount"),
            card=CreditCard(
                card_number=_text(fields, "x_card_num"),
                expiration_date=_text(fields, "x_exp_date"),
            ),
            first_name=_text(fields, "x_first_name"),
            last_name=_text(fields, "x_last_name"),
        )

    if mode is SubscriptionMode.UPDATE:
        card_number = _text(fields, "x_card_num")
        expiration = _text(fields, "x_exp_date")
        return UpdateSubscription(
            auth=auth,
            ref_id=ref_id,
            subscription_id=_text(fields, "x_subsc_id"),
            amount=_text(fields, "x_amount") or None,
            card=CreditCard(card_number, expiration) if card_number and expiration else None,
        )

    return CancelSubscription(
        auth=auth,
        ref_id=ref_id,
        subscription_id=_text(fields, "x_subsc_id"),
    )


def _auth_block(auth: MerchantAuthentication) -> Dict[str, str]:
    return {"name": auth.name, "transactionKey": auth.transaction_key}


def _card_block(card: CreditCard) -> Dict[str, Any]:
    return {
        "creditCard": {
            "cardNumber": card.card_number,
            "expirationDate": card.expiration_date,
        }
    }


def subscription_tree(request: SubscriptionRequest) -> Tuple[str, Named]:
    """
    Root element name and body for a subscription request.
    """
    if isinstance(request, CreateSubscription):
        body: Dict[str, Any] = {
            "merchantAuthentication": _auth_block(request.auth),
            "refId": request.ref_id,
            "subscription": {
                "name": request.name,
                "paymentSchedule": {
                    "interval": {
                        "length": request.schedule.length,
                        "unit": request.schedule.unit,
                    },
                    "startDate": request.schedule.start_date,
                    "totalOccurrences": request.schedule.total_occurrences,
                    "trialOccurrences": request.schedule.trial_occurrences,
                },
                "amount": request.amount,
                "trialAmount": request.trial_amount,
                "payment": _card_block(request.card),
                "billTo": {
                    "firstName": request.first_name,
                    "lastName": request.last_name,
                },
            },
        }
        root = ROOT_ELEMENTS[SubscriptionMode.CREATE]

    elif isinstance(request, UpdateSubscription):
        subscription: Dict[str, Any] = {}
        if request.amount:
            subscription["amount"] = request.amount
        if request.card is not None:
            subscription["payment"] = _card_block(request.card)
        body = {
            "merchantAuthentication": _auth_block(request.auth),
            "refId": request.ref_id,
            "subscriptionId": request.subscription_id,
            "subscription": subscription,
        }
        root = ROOT_ELEMENTS[SubscriptionMode.UPDATE]

    elif isinstance(request, CancelSubscription):
        body = {
            "merchantAuthentication": _auth_block(request.auth),
            "refId": request.ref_id,
            "subscriptionId": request.subscription_id,
        }
        root = ROOT_ELEMENTS[SubscriptionMode.CANCEL]

    else:
        raise TypeError(f"Unknown subscription request {type(request).__name__}")

    return root, to_node(body)


def build_subscription_xml(request: SubscriptionRequest) -> str:
    """
    Serialize a subscription request, with the API schema namespace set on
    the root element.
    """
    root, body = subscription_tree(request)
    xml = serialize(body, root)
    # Declared on the text so the unqualified children inherit it.
    xml = xml.replace(f"<{root}", f'<{root} xmlns="{ARB_NAMESPACE}"', 1)
    logger.debug("Built %s (%d bytes)", root, len(xml))
    return xml

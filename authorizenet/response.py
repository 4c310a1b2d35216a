# =============================================================================
# Authorize.net - Delimited response decoding
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

"""
The delimited gateway answers with a flat list of values whose meaning is
given only by position. This module names those positions.

See https://www.authorize.net/support/merchant/Transaction_Response/Transaction_Response.htm
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import unquote_plus

from .models import ResponseField


DELIMITER = "|"

RESPONSE_FIELDS: Tuple[ResponseField, ...] = (
    ResponseField("Response Code", "response_code"),
    ResponseField("Response Subcode", "response_subcode"),
    ResponseField("Response Reason Code", "response_reason_code"),
    ResponseField("Response Reason Text", "response_reason_text"),
    ResponseField("Approval Code", "approval_code"),
    ResponseField("AVS Result Code", "avs_result_code"),
    ResponseField("Transaction ID", "transaction_id"),
    ResponseField("Invoice Number", "invoice_number"),
    ResponseField("Description", "description"),
    ResponseField("Amount", "amount"),
    ResponseField("Method", "method"),
    ResponseField("Transaction Type", "transaction_type"),
    ResponseField("Customer ID", "customer_id"),
    ResponseField("Cardholder First Name", "cardholder_first_name"),
    ResponseField("Cardholder Last Name", "cardholder_last_name"),
    ResponseField("Company", "company"),
    ResponseField("Billing Address", "billing_address"),
    ResponseField("City", "city"),
    ResponseField("State", "state"),
    ResponseField("Zip", "zip"),
    ResponseField("Country", "country"),
    ResponseField("Phone", "phone"),
    ResponseField("Fax", "fax"),
    ResponseField("Email", "email"),
    ResponseField("Ship to First Name", "shipto_first_name"),
    ResponseField("Ship to Last Name", "shipto_last_name"),
    ResponseField("Ship to Company", "shipto_company"),
    ResponseField("Ship to Address", "shipto_address"),
    ResponseField("Ship to City", "shipto_city"),
    ResponseField("Ship to State", "shipto_state"),
    ResponseField("Ship to Zip", "shipto_zip"),
    ResponseField("Ship to Country", "shipto_country"),
    ResponseField("Tax Amount", "tax_amount"),
    ResponseField("Duty Amount", "duty_amount"),
    ResponseField("Freight Amount", "freight_amount"),
    ResponseField("Tax Exempt Flag", "tax_exempt_flag"),
    ResponseField("PO Number", "po_number"),
    ResponseField("MD5 Hash", "hash"),
    ResponseField("Card Code (CVV2/CVC2/CID) Response Code", "cvv_response_code"),
    ResponseField(
        "Cardholder Authentication Verification Value (CAVV) Response Code",
        "cavv_response_code",
    ),
)

# Positions read by the client accessors.
RESPONSE_CODE = 0
RESPONSE_REASON_TEXT = 3
TRANSACTION_ID = 6


def split_response(body: str, delimiter: str = DELIMITER) -> List[str]:
    """
    Percent-decode a raw response body and split it into positional values.

    Any string is a valid input; an empty body yields `[""]`.
    """
    return unquote_plus(body).split(delimiter)


def decode_nice(raw: Sequence[str]) -> Dict[str, str]:
    """
    Map raw values to human readable labels.

    Only positions covered by both `raw` and the label list are returned;
    values beyond the last label are left to the raw form.
    """
    return {f.nice: value for f, value in zip(RESPONSE_FIELDS, raw)}


def decode_code(raw: Sequence[str]) -> Dict[Union[str, int], str]:
    """
    Map raw values to snake_case labels.

    Values beyond the last label are keyed by their integer position.
    """
    named: Dict[Union[str, int], str] = {}
    for index, value in enumerate(raw):
        key: Union[str, int] = RESPONSE_FIELDS[index].code if index < len(RESPONSE_FIELDS) else index
        named[key] = value
    return named


def field_value(raw: Sequence[str], index: int) -> Optional[str]:
    """Value at `index`, or None if the gateway did not send that position."""
    if 0 <= index < len(raw):
        return raw[index]
    return None


def is_approved(raw: Sequence[str]) -> bool:
    """True only if the response code is exactly the string "1"."""
    return field_value(raw, RESPONSE_CODE) == "1"

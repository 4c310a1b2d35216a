# =============================================================================
# Authorize.net - Data models
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

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union


class SubscriptionMode(Enum):
    """
    Request shape sent to the recurring billing gateway.

    A client starts in CREATE or UPDATE (when a subscription id is known)
    and may only move to CANCEL afterwards.
    """

    CREATE = "create"
    UPDATE = "update"
    CANCEL = "cancel"


@dataclass(frozen=True)
class ResponseField:
    """
    One position of the delimited gateway response.

    Attributes:
        nice: Human readable label (e.g. "Response Code").
        code: snake_case label safe for database columns (e.g. "response_code").
    """

    nice: str
    code: str


@dataclass(frozen=True)
class MerchantAuthentication:
    """
    Merchant credentials.

    Attributes:
        name: API login id (`x_login`).
        transaction_key: Transaction key (`x_tran_key`).
    """

    name: str
    transaction_key: str


@dataclass(frozen=True)
class CreditCard:
    """
    Card used to pay a subscription.

    Attributes:
        card_number: Full card number.
        expiration_date: Expiry as accepted by the gateway (YYYY-MM or MMYY).
    """

    card_number: str
    expiration_date: str


@dataclass(frozen=True)
class PaymentSchedule:
    """
    Billing cadence of a subscription.

    Attributes:
        length: Interval length (e.g. "1").
        unit: Interval unit, "days" or "months".
        start_date: First billing date, YYYY-MM-DD.
        total_occurrences: Number of billing occurrences ("9999" = no end).
        trial_occurrences: Number of occurrences billed at the trial amount.
    """

    length: str
    unit: str
    start_date: str
    total_occurrences: str
    trial_occurrences: str


@dataclass(frozen=True)
class CreateSubscription:
    """ARBCreateSubscriptionRequest payload."""

    auth: MerchantAuthentication
    ref_id: str
    name: str
    schedule: PaymentSchedule
    amount: str
    trial_amount: str
    card: CreditCard
    first_name: str
    last_name: str


@dataclass(frozen=True)
class UpdateSubscription:
    """
    ARBUpdateSubscriptionRequest payload.

    `amount` and `card` are None when the caller did not provide them; the
    request then leaves the subscription's current values untouched.
    """

    auth: MerchantAuthentication
    ref_id: str
    subscription_id: str
    amount: Optional[str] = None
    card: Optional[CreditCard] = None


@dataclass(frozen=True)
class CancelSubscription:
    """ARBCancelSubscriptionRequest payload."""

    auth: MerchantAuthentication
    ref_id: str
    subscription_id: str


SubscriptionRequest = Union[CreateSubscription, UpdateSubscription, CancelSubscription]

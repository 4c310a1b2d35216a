from .aim import AuthorizeNet
from .arb import AuthorizeNetRecurring
from .models import (
    CancelSubscription,
    CreateSubscription,
    CreditCard,
    MerchantAuthentication,
    PaymentSchedule,
    ResponseField,
    SubscriptionMode,
    UpdateSubscription,
)
from .response import RESPONSE_FIELDS, decode_code, decode_nice, is_approved

__all__ = [
    "AuthorizeNet",
    "AuthorizeNetRecurring",
    "CancelSubscription",
    "CreateSubscription",
    "CreditCard",
    "MerchantAuthentication",
    "PaymentSchedule",
    "ResponseField",
    "SubscriptionMode",
    "UpdateSubscription",
    "RESPONSE_FIELDS",
    "decode_code",
    "decode_nice",
    "is_approved",
]

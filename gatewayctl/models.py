# =============================================================================
# GatewayClient Library – Transport Response Model
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
from dataclasses import dataclass


@dataclass(frozen=True)
class GatewayResponse:
    """
    Immutable representation of one HTTP round trip to a gateway endpoint.

    Attributes:
        endpoint:
            Full URL the request was posted to.

        status_code:
            HTTP status code returned by the gateway. Only successful codes
            reach callers; error codes are raised as transport errors.

        text:
            Response body decoded as text, unmodified. Gateway-specific
            decoding (delimiter splitting, XML parsing) happens in the
            gateway clients.

        elapsed_s:
            Wall-clock duration of the request in seconds.
    """

    endpoint: str
    status_code: int
    text: str
    elapsed_s: float

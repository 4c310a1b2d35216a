# =============================================================================
# GatewayClient Library – Exceptions Module
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


class GatewayError(Exception):
    """
    Base exception for the library.

    All custom exceptions of the gateway library inherit from this class so
    that callers can catch `GatewayError` to handle any library-specific
    failure in a generic way.
    """
    pass


class GatewayTransportError(GatewayError):
    """
    Errors related to the transport layer.

    This includes problems such as:
      - Network unreachable
      - TLS handshake failures
      - Request timeouts
      - HTTP error status codes (4xx/5xx)

    The request body may or may not have reached the gateway; callers must
    not assume the transaction was (or was not) recorded.
    """
    pass


class GatewayProtocolError(GatewayError):
    """
    A request or response does not follow the expected gateway format.

    Raised when:
      - The XML body returned by the gateway cannot be parsed
      - A structured request cannot be turned into a single-rooted XML
        document
    """
    pass

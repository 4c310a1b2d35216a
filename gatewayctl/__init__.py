from .client import GatewayClient
from .config import GatewayConfig
from .models import GatewayResponse
from .xmltree import Named, Repeated, Scalar, build_tree, serialize, to_node
from .exceptions import (
    GatewayError,
    GatewayTransportError,
    GatewayProtocolError,
)

__all__ = [
    "GatewayClient",
    "GatewayConfig",
    "GatewayResponse",
    "Named",
    "Repeated",
    "Scalar",
    "build_tree",
    "serialize",
    "to_node",
    "GatewayError",
    "GatewayTransportError",
    "GatewayProtocolError",
]

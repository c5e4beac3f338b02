"""Tunnel update - validated update requests for forwarding tunnels."""

from .common.exceptions import (
    ConfigurationError,
    TunnelMismatchError,
    TunnelUpdateError,
    ValidationError,
    Violation,
)
from .common.logging import get_logger, setup_logging
from .tunnel import (
    ChainTunnelRow,
    ChainType,
    FlowMode,
    NodeRef,
    TopologyPlan,
    TunnelRecord,
    TunnelUpdateRequest,
    TunnelUpdateValidator,
    ValidatorConfig,
    plan_topology,
    validate_tunnel_update,
)

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Requests
    "TunnelUpdateRequest",
    "NodeRef",
    "FlowMode",
    "ChainType",
    "TunnelRecord",
    # Validation
    "TunnelUpdateValidator",
    "ValidatorConfig",
    "validate_tunnel_update",
    # Topology
    "ChainTunnelRow",
    "TopologyPlan",
    "plan_topology",
    # Exceptions
    "TunnelUpdateError",
    "ValidationError",
    "Violation",
    "ConfigurationError",
    "TunnelMismatchError",
    # Logging
    "get_logger",
    "setup_logging",
]

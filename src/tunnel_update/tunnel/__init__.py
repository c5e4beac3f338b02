"""Tunnel update request handling.

Models, validation and topology planning for updates to existing tunnels.
"""

from .config import ValidatorConfig
from .models import ChainType, FlowMode, NodeRef, TunnelRecord
from .request import TRAFFIC_RATIO_MAX, TRAFFIC_RATIO_MIN, TunnelUpdateRequest
from .topology import ChainTunnelRow, TopologyPlan, plan_topology
from .validator import TunnelUpdateValidator, validate_tunnel_update

__all__ = [
    # Models
    "FlowMode",
    "ChainType",
    "NodeRef",
    "TunnelRecord",
    "TunnelUpdateRequest",
    "TRAFFIC_RATIO_MIN",
    "TRAFFIC_RATIO_MAX",
    # Config
    "ValidatorConfig",
    # Validation
    "TunnelUpdateValidator",
    "validate_tunnel_update",
    # Topology
    "ChainTunnelRow",
    "TopologyPlan",
    "plan_topology",
]

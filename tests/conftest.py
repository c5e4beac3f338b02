"""Shared pytest fixtures for tunnel update tests."""

import pytest

from tunnel_update.tunnel import TunnelUpdateValidator


@pytest.fixture
def valid_payload():
    """Minimal acceptable update payload.

    Returns:
        dict: Wire-form payload with only required fields
    """
    return {"id": 5, "name": "edge-1", "flow": 1}


@pytest.fixture
def full_payload():
    """Payload touching every field, including a two-hop chain.

    Returns:
        dict: Wire-form payload
    """
    return {
        "id": 42,
        "name": "  hk-relay  ",
        "flow": 2,
        "inIp": "10.0.0.1",
        "trafficRatio": 1.5,
        "inNodeId": [{"nodeId": 1, "port": 10001, "strategy": "round"}],
        "chainNodes": [
            [{"nodeId": 2, "protocol": "tls"}, {"nodeId": 3, "protocol": "tls"}],
            [{"nodeId": 4}],
        ],
        "outNodeId": [{"nodeId": 9, "port": 20001}],
    }


@pytest.fixture
def validator():
    """Validator with default configuration.

    Returns:
        TunnelUpdateValidator: Validator instance
    """
    return TunnelUpdateValidator()

"""Tests for update request serialization."""

from decimal import Decimal

from tunnel_update.tunnel import TunnelUpdateRequest


class TestRequestSerialization:
    def test_to_payload_omits_unset(self, valid_payload):
        """Test that unset optionals are left out of the wire form"""
        request = TunnelUpdateRequest.model_validate(valid_payload)

        assert request.to_payload() == {"id": 5, "name": "edge-1", "flow": 1}

    def test_to_payload_keeps_empty_lists(self, valid_payload):
        """Test that a cleared section survives serialization"""
        request = TunnelUpdateRequest.model_validate(
            {**valid_payload, "inNodeId": [], "chainNodes": [[]]}
        )

        data = request.to_payload()

        assert data["inNodeId"] == []
        assert data["chainNodes"] == [[]]
        assert "outNodeId" not in data

    def test_full_round_trip(self, full_payload):
        """Test wire form round trip"""
        request = TunnelUpdateRequest.model_validate(full_payload)

        data = request.to_payload()

        assert data["trafficRatio"] == 1.5
        assert isinstance(data["trafficRatio"], float)
        assert data["inIp"] == "10.0.0.1"
        assert data["inNodeId"] == [{"nodeId": 1, "port": 10001, "strategy": "round"}]
        assert TunnelUpdateRequest.model_validate(data) == request

    def test_json_round_trip(self, full_payload):
        request = TunnelUpdateRequest.model_validate(full_payload)

        restored = TunnelUpdateRequest.model_validate_json(request.model_dump_json())

        assert restored == request
        assert restored.chain_nodes == request.chain_nodes

    def test_traffic_ratio_is_json_number(self, valid_payload):
        """Test that the ratio is written as a number, like the inbound body"""
        request = TunnelUpdateRequest.model_validate(
            {**valid_payload, "trafficRatio": 2.5}
        )

        assert request.to_payload()["trafficRatio"] == 2.5
        assert '"trafficRatio":2.5' in request.model_dump_json(by_alias=True)
        assert request.model_dump()["traffic_ratio"] == Decimal("2.5")

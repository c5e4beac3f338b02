"""Tunnel update request model.

A request names an existing tunnel by ``id`` and carries the new scalar
settings plus, optionally, a replacement topology. Each topology field has
three states:

* ``None`` (absent or ``null`` on the wire): leave that section unchanged
* ``[]``: clear that section
* non-empty list: replace that section

``chain_nodes`` is a list of hops in forwarding order; each hop is a list of
alternative nodes kept in the order they were given.
"""

from decimal import Decimal
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..common.exceptions import TunnelMismatchError
from .models import INT64_MAX, INT64_MIN, ChainType, FlowMode, NodeRef, TunnelRecord

TRAFFIC_RATIO_MIN = Decimal("0.0")
TRAFFIC_RATIO_MAX = Decimal("100.0")

_SECTION_FIELDS = {
    ChainType.IN: "in_node_id",
    ChainType.CHAIN: "chain_nodes",
    ChainType.OUT: "out_node_id",
}


class TunnelUpdateRequest(BaseModel):
    """Validated, immutable update request for an existing tunnel."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: int = Field(
        strict=True, ge=INT64_MIN, le=INT64_MAX, description="Existing tunnel id"
    )
    name: str = Field(min_length=1, description="Tunnel display name")
    flow: int = Field(strict=True, description="Traffic accounting mode")
    in_ip: str | None = Field(default=None, description="Inbound bind address")
    traffic_ratio: Decimal | None = Field(
        default=None,
        gt=TRAFFIC_RATIO_MIN,
        le=TRAFFIC_RATIO_MAX,
        description="Multiplier applied to accounted traffic",
    )
    in_node_id: list[NodeRef] | None = Field(
        default=None, description="Entry node candidates"
    )
    chain_nodes: list[list[NodeRef]] | None = Field(
        default=None, description="Intermediate hops, each with alternative nodes"
    )
    out_node_id: list[NodeRef] | None = Field(
        default=None, description="Exit node candidates"
    )

    @field_validator("flow")
    @classmethod
    def validate_flow(cls, v: int, info: ValidationInfo) -> int:
        """Check the accounting mode against the recognized set.

        The set comes from the validation context (``flow_modes``); checking
        is skipped when the context sets ``check_flow_mode`` to False.
        """
        context = info.context or {}
        if not context.get("check_flow_mode", True):
            return v

        modes = context.get("flow_modes") or frozenset(FlowMode)
        if v not in modes:
            raise PydanticCustomError(
                "flow_mode", "unrecognized flow mode", {"flow": v}
            )
        return v

    @field_serializer("traffic_ratio", when_used="json-unless-none")
    def serialize_traffic_ratio(self, v: Decimal) -> float:
        """Emit the ratio as a JSON number, matching the inbound body."""
        return float(v)

    @property
    def flow_mode(self) -> FlowMode | None:
        """Accounting mode as a known enumerator, None if not a built-in mode."""
        try:
            return FlowMode(self.flow)
        except ValueError:
            return None

    def section(self, chain_type: ChainType) -> Any:
        """Get the raw topology field for a section."""
        return getattr(self, _SECTION_FIELDS[chain_type])

    def is_unchanged(self, chain_type: ChainType) -> bool:
        """Check whether the request leaves a topology section alone."""
        return self.section(chain_type) is None

    def changed_sections(self) -> list[ChainType]:
        """List topology sections this request replaces or clears."""
        return [ct for ct in ChainType if not self.is_unchanged(ct)]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to wire form.

        Unset optional fields are omitted, empty topology lists are kept so
        that "clear" survives the round trip.

        Returns:
            JSON compatible dictionary with camelCase keys
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def apply_to(self, record: TunnelRecord) -> TunnelRecord:
        """Create an updated copy of a stored tunnel record.

        Args:
            record: Current stored attributes of the tunnel

        Returns:
            New record with this request's scalar settings applied

        Raises:
            TunnelMismatchError: If the record belongs to another tunnel
        """
        if record.id != self.id:
            raise TunnelMismatchError(
                f"Update for tunnel {self.id} cannot be applied to tunnel {record.id}"
            )

        update_data: dict[str, Any] = {"name": self.name, "flow": self.flow}
        if self.traffic_ratio is not None:
            update_data["traffic_ratio"] = self.traffic_ratio
        if self.in_ip is not None:
            update_data["in_ip"] = self.in_ip

        return TunnelRecord.model_validate({**record.model_dump(), **update_data})

"""Tunnel models referenced by update requests.

This module defines the accounting mode and topology section enumerations,
the node reference carried in topology fields and the stored tunnel record
an update is applied to.
"""

from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class FlowMode(IntEnum):
    """Traffic accounting mode enumeration."""

    SINGLE = 1  # upload only
    DOUBLE = 2  # upload and download


class ChainType(IntEnum):
    """Topology section a node belongs to."""

    IN = 1
    CHAIN = 2
    OUT = 3


class NodeRef(BaseModel):
    """Reference to a forwarding node owned by the node registry.

    Only the shape is checked here; whether the node exists is up to the
    registry.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    node_id: int = Field(description="Registry identity of the node")
    port: int | None = Field(default=None, description="Listen port on the node")
    strategy: str | None = Field(
        default=None, description="Load balancing strategy across alternatives"
    )
    protocol: str | None = Field(default=None, description="Hop transport protocol")
    inx: int | None = Field(default=None, description="Display order hint")


class TunnelRecord(BaseModel):
    """Stored tunnel attributes that an update request can change."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    name: str
    flow: int = Field(default=FlowMode.SINGLE)
    traffic_ratio: Decimal = Field(default=Decimal("1"))
    in_ip: str | None = None

    @field_validator("flow")
    @classmethod
    def default_flow(cls, v: int) -> int:
        """Treat unset or negative accounting modes as single direction."""
        return v if v > 0 else FlowMode.SINGLE

    @field_validator("traffic_ratio")
    @classmethod
    def default_traffic_ratio(cls, v: Decimal) -> Decimal:
        """Treat a non-positive ratio as the neutral multiplier."""
        return v if v > 0 else Decimal("1")

"""Topology plan derived from an update request.

Flattens the entry, chain and exit sections of a request into the chain rows
the tunnel store keeps per node. Sections the request leaves alone stay
``None`` in the plan so the store can skip them.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..common.logging import get_logger
from .models import ChainType, NodeRef
from .request import TunnelUpdateRequest

logger = get_logger(__name__)


class ChainTunnelRow(BaseModel):
    """One node placement within a tunnel topology."""

    model_config = ConfigDict(frozen=True)

    tunnel_id: int
    chain_type: ChainType
    node_id: int
    port: int | None = None
    strategy: str | None = None
    protocol: str | None = None
    inx: int | None = Field(default=None, description="Hop index for chain rows")

    @classmethod
    def from_node(
        cls,
        tunnel_id: int,
        chain_type: ChainType,
        node: NodeRef,
        inx: int | None = None,
    ) -> "ChainTunnelRow":
        """Build a row placing a referenced node in one topology section."""
        return cls(
            tunnel_id=tunnel_id,
            chain_type=chain_type,
            node_id=node.node_id,
            port=node.port,
            strategy=node.strategy,
            protocol=node.protocol,
            inx=inx,
        )


class TopologyPlan(BaseModel):
    """Per-section replacement rows; None marks an untouched section."""

    model_config = ConfigDict(frozen=True)

    tunnel_id: int
    in_rows: list[ChainTunnelRow] | None = None
    chain_rows: list[ChainTunnelRow] | None = None
    out_rows: list[ChainTunnelRow] | None = None
    hop_count: int | None = Field(
        default=None, description="Chain hops after the update, None if unchanged"
    )

    def rows_for(self, chain_type: ChainType) -> list[ChainTunnelRow] | None:
        """Get replacement rows for a section, None if it is unchanged."""
        return {
            ChainType.IN: self.in_rows,
            ChainType.CHAIN: self.chain_rows,
            ChainType.OUT: self.out_rows,
        }[chain_type]

    @property
    def replaced_sections(self) -> list[ChainType]:
        """Sections the plan replaces or clears, in entry, chain, exit order."""
        return [ct for ct in ChainType if self.rows_for(ct) is not None]

    @property
    def clears_chain(self) -> bool:
        """True when the chain is emptied, not when a hop merely has no nodes."""
        return self.hop_count == 0

    @property
    def empty_hops(self) -> list[int]:
        """Hop indexes that carry no node rows."""
        if self.hop_count is None:
            return []
        used = {row.inx for row in self.chain_rows or []}
        return [hop for hop in range(self.hop_count) if hop not in used]

    def all_rows(self) -> list[ChainTunnelRow]:
        """All rows of the replaced sections in entry, chain, exit order."""
        rows: list[ChainTunnelRow] = []
        for chain_type in ChainType:
            rows.extend(self.rows_for(chain_type) or [])
        return rows


def plan_topology(request: TunnelUpdateRequest) -> TopologyPlan:
    """Build the topology plan for a validated request.

    Args:
        request: Accepted update request

    Returns:
        Plan with rows for each replaced or cleared section
    """
    in_rows = None
    if request.in_node_id is not None:
        in_rows = [
            ChainTunnelRow.from_node(request.id, ChainType.IN, node)
            for node in request.in_node_id
        ]

    chain_rows = None
    hop_count = None
    if request.chain_nodes is not None:
        hop_count = len(request.chain_nodes)
        chain_rows = [
            ChainTunnelRow.from_node(request.id, ChainType.CHAIN, node, inx=hop)
            for hop, alternatives in enumerate(request.chain_nodes)
            for node in alternatives
        ]

    out_rows = None
    if request.out_node_id is not None:
        out_rows = [
            ChainTunnelRow.from_node(request.id, ChainType.OUT, node)
            for node in request.out_node_id
        ]

    plan = TopologyPlan(
        tunnel_id=request.id,
        in_rows=in_rows,
        chain_rows=chain_rows,
        out_rows=out_rows,
        hop_count=hop_count,
    )
    logger.debug(
        "Topology plan built",
        tunnel_id=request.id,
        replaced_sections=[ct.name for ct in plan.replaced_sections],
        row_count=len(plan.all_rows()),
    )
    return plan

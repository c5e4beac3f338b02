"""Utility functions for tunnel update handling."""

from collections.abc import Mapping, Sequence


def format_location(
    loc: Sequence[int | str], aliases: Mapping[str, str] | None = None
) -> str:
    """Render a pydantic error location as a dotted wire path.

    Attribute names found in ``aliases`` are replaced by their wire names,
    list indexes are kept as-is.

    Args:
        loc: Error location tuple, e.g. ``("chain_nodes", 0, 1, "node_id")``
        aliases: Mapping of attribute name to wire name

    Returns:
        Dotted path such as ``chainNodes.0.1.nodeId``
    """
    aliases = aliases or {}
    parts = []
    for part in loc:
        if isinstance(part, str):
            parts.append(aliases.get(part, part))
        else:
            parts.append(str(part))
    return ".".join(parts)

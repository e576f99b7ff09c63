"""Match trace nodes to their origins by shared movement identifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lingtree.tree.layout import Positioned, iter_nodes

logger = logging.getLogger(__name__)

TRACE_LABEL = "t"


@dataclass
class MovementGroup:
    origin: Positioned | None = None
    traces: list[Positioned] = field(default_factory=list)
    ignored_origins: list[Positioned] = field(default_factory=list)


def resolve_movement(root: Positioned) -> dict[str, MovementGroup]:
    """Group every identified node by its identifier.

    A node labelled ``t`` is a trace; any other node is the origin. When
    several non-trace nodes share an identifier, the first in document order
    stays the origin and the rest are recorded in ``ignored_origins``.
    """
    groups: dict[str, MovementGroup] = {}
    for node in iter_nodes(root):
        if not node.id:
            continue
        group = groups.setdefault(node.id, MovementGroup())
        if node.label == TRACE_LABEL:
            group.traces.append(node)
        elif group.origin is None:
            group.origin = node
        else:
            logger.warning(
                "Movement id %r already has origin %r; ignoring %r",
                node.id, group.origin.label, node.label,
            )
            group.ignored_origins.append(node)
    return groups


def movement_arcs(groups: dict[str, MovementGroup]) -> list[tuple[Positioned, Positioned]]:
    """Return ``(origin, trace)`` pairs; groups without an origin draw nothing."""
    arcs = []
    for group in groups.values():
        if group.origin is None:
            continue
        arcs.extend((group.origin, trace) for trace in group.traces)
    return arcs

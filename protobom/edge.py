"""Typed, directed edges that connect nodes in the SBOM graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from protobom.enums import EdgeType


@dataclass
class Edge:
    """A relationship of one type from a node to one or more other nodes."""

    type: EdgeType = EdgeType.UNKNOWN
    from_: str = ""
    to: list[str] = field(default_factory=list)

    def copy(self) -> Edge:
        """Return a duplicate of the edge with its own destination list."""
        return Edge(type=self.type, from_=self.from_, to=list(self.to))

    def points_to(self, node_id: str) -> bool:
        """Return True if ``node_id`` is among the edge's destinations."""
        return node_id in self.to

    def equal(self, other: Edge | None) -> bool:
        """Return True if ``other`` has the same source, type and destinations."""
        if other is None:
            return False
        return self.flat_string() == other.flat_string()

    def flat_string(self) -> str:
        """Return a deterministic serialisation of the edge for comparisons."""
        return f"{self.from_}:{self.type.name}:" + "+".join(sorted(self.to))

    def add_destination_by_id(self, *args: str) -> None:
        """Add destination IDs, skipping any that are already present."""
        seen = set(self.to)
        for node_id in args:
            if node_id in seen:
                continue
            seen.add(node_id)
            self.to.append(node_id)
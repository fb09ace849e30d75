"""Graph fragments of an SBOM: nodes, the edges between them and their roots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from protobom.edge import Edge
from protobom.enums import EdgeType, software_identifier_type_from_string
from protobom.node import Node


class MoreThanOneMatchError(LookupError):
    """Raised when a lookup that must be unique matches several nodes."""

    def __init__(self, message: str = "more than one node matches") -> None:
        super().__init__(message)


class NodeNotFoundError(LookupError):
    """Raised when a node ID required by an operation is not in the list."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"node with ID {node_id} not found")
        self.node_id = node_id


@dataclass
class NodeList:
    """A set of nodes, the typed edges relating them and the top level IDs."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    root_elements: list[str] = field(default_factory=list)

    # Indexes

    def _index_nodes(self) -> dict[str, Node]:
        return {node.id: node for node in self.nodes}

    def _index_edges(self) -> dict[str, dict[EdgeType, list[Edge]]]:
        index: dict[str, dict[EdgeType, list[Edge]]] = {}
        for edge in self.edges:
            index.setdefault(edge.from_, {}).setdefault(edge.type, []).append(edge)
        return index

    def _index_root_elements(self) -> set[str]:
        return set(self.root_elements)

    def index_nodes_by_hash(self) -> dict[str, list[Node]]:
        """Index nodes by ``"<algorithm>:<value>"``; several nodes may share a key."""
        index: dict[str, list[Node]] = {}
        for node in self.nodes:
            for algorithm, value in node.hashes.items():
                if not value:
                    continue
                index.setdefault(f"{int(algorithm)}:{value}", []).append(node)
        return index

    def index_nodes_by_purl(self) -> dict[str, list[Node]]:
        """Index nodes by package URL; nodes without one are left out."""
        index: dict[str, list[Node]] = {}
        for node in self.nodes:
            purl = node.purl()
            if purl:
                index.setdefault(purl, []).append(node)
        return index

    # Structure maintenance

    def clean_edges(self) -> None:
        """Drop broken destinations and orphaned edges, merging duplicates."""
        node_index = self._index_nodes()
        merged: dict[tuple[str, EdgeType], Edge] = {}
        destinations: dict[tuple[str, EdgeType], dict[str, None]] = {}

        for edge in self.edges:
            if edge.from_ not in node_index:
                continue
            key = (edge.from_, edge.type)
            if key not in merged:
                merged[key] = Edge(type=edge.type, from_=edge.from_, to=[])
                destinations[key] = {}
            for dest in edge.to:
                if dest in node_index:
                    destinations[key][dest] = None

        new_edges = []
        for key, edge in merged.items():
            edge.to = list(destinations[key])
            if edge.to:
                new_edges.append(edge)
        self.edges = new_edges

    def add_edge(self, edge: Edge) -> None:
        """Append an edge to the list."""
        self.edges.append(edge)

    def add_node(self, node: Node) -> None:
        """Append a node to the list."""
        self.nodes.append(node)

    def add_root_node(self, node: Node) -> None:
        """Add a node and register it as a root element.

        Nodes without an ID, or whose ID is already a root, are ignored.
        """
        if not node.id or node.id in self.root_elements:
            return
        self.add_node(node)
        self.root_elements.append(node.id)

    def add(self, other: NodeList) -> None:
        """Merge ``other`` into this list in place (an in-place union)."""
        existing_nodes = self._index_nodes()
        for node in other.nodes:
            if node.id in existing_nodes:
                existing_nodes[node.id].augment(node)
            else:
                self.nodes.append(node)

        existing_edges = self._index_edges()
        for edge in other.edges:
            by_type = existing_edges.get(edge.from_)
            if by_type is None or edge.type not in by_type:
                self.edges.append(edge)
                continue
            by_type[edge.type][0].to.extend(edge.to)

        roots = self._index_root_elements()
        for node_id in other.root_elements:
            if node_id not in roots:
                self.root_elements.append(node_id)
                roots.add(node_id)

        self.clean_edges()

    def remove_nodes(self, ids: list[str]) -> None:
        """Remove the nodes with the given IDs and the edges that touch them."""
        drop = set(ids)
        self.nodes = [node for node in self.nodes if node.id not in drop]
        self.clean_edges()

    # Queries

    def get_edge_by_type(self, from_id: str, edge_type: EdgeType) -> Optional[Edge]:
        """Return the first edge of ``edge_type`` leaving ``from_id``, if any."""
        return next(
            (e for e in self.edges if e.from_ == from_id and e.type == edge_type),
            None,
        )

    def get_nodes_by_name(self, name: str) -> list[Node]:
        """Return every node with the given name."""
        return [node for node in self.nodes if node.name == name]

    def get_node_by_id(self, node_id: str) -> Optional[Node]:
        """Return the first node with the given ID, or None."""
        return next((node for node in self.nodes if node.id == node_id), None)

    def get_nodes_by_identifier(self, id_type: str, value: str) -> list[Node]:
        """Return nodes whose identifier of ``id_type`` equals ``value``."""
        key = int(software_identifier_type_from_string(id_type))
        return [
            node
            for node in self.nodes
            if key in node.identifiers and node.identifiers[key] == value
        ]

    def get_root_nodes(self) -> list[Node]:
        """Return the nodes listed as root elements, in node order."""
        roots = self._index_root_elements()
        found: list[Node] = []
        for node in self.nodes:
            if node.id in roots:
                found.append(node)
                if len(found) == len(roots):
                    break
        return found

    def get_matching_node(self, node: Node) -> Optional[Node]:
        """Find the single node describing the same software as ``node``.

        Hashes are tried first; package URLs are used when no hash matches
        or to break a tie between several hash matches. Returns None when
        nothing matches and raises MoreThanOneMatchError on ambiguity.
        """
        found: dict[str, Node] = {}
        if node.hashes:
            hash_index = self.index_nodes_by_hash()
            for algorithm, value in node.hashes.items():
                for candidate in hash_index.get(f"{int(algorithm)}:{value}", []):
                    if candidate.id in found:
                        continue
                    if candidate.hashes_match(node.hashes):
                        found[candidate.id] = candidate

        test_purl = node.purl()
        if len(found) == 1:
            return next(iter(found.values()))

        if not found:
            if not test_purl:
                return None
            matches = self.index_nodes_by_purl().get(test_purl)
            if not matches:
                return None
            if len(matches) == 1:
                return matches[0]
            raise MoreThanOneMatchError()

        if not test_purl:
            raise MoreThanOneMatchError()
        by_purl = [n for n in found.values() if n.purl() and n.purl() == test_purl]
        if len(by_purl) == 1:
            return by_purl[0]
        raise MoreThanOneMatchError()

    # Whole-list operations

    def copy(self) -> NodeList:
        """Return a deep copy of the node list."""
        return NodeList(
            nodes=[node.copy() for node in self.nodes],
            edges=[edge.copy() for edge in self.edges],
            root_elements=list(self.root_elements),
        )

    def intersect(self, other: NodeList) -> NodeList:
        """Return a new list of the nodes present in both lists.

        Common nodes are copied from this list and updated with data from
        ``other``; edges of both lists are merged and then cleaned.
        """
        roots = self._index_root_elements()
        other_roots = other._index_root_elements()
        result = NodeList(edges=[edge.copy() for edge in self.edges])

        other_index = other._index_nodes()
        for node_id, node in self._index_nodes().items():
            if node_id not in other_index:
                continue
            new_node = node.copy()
            new_node.update(other_index[node_id])
            result.nodes.append(new_node)
            if node_id in roots or node_id in other_roots:
                result.root_elements.append(node_id)

        for edge in other.edges:
            existing = result.get_edge_by_type(edge.from_, edge.type)
            if existing is None:
                result.edges.append(edge.copy())
                continue
            present = set(existing.to)
            for dest in edge.to:
                if dest not in present:
                    existing.to.append(dest)
                    present.add(dest)

        result.clean_edges()
        return result

    def union(self, other: NodeList) -> NodeList:
        """Return a new list combining the nodes and edges of both lists.

        Nodes from this list are copied and updated with data from ``other``.
        """
        result = NodeList(
            nodes=[node.copy() for node in self.nodes],
            edges=[edge.copy() for edge in self.edges],
            root_elements=list(self.root_elements),
        )

        node_index = result._index_nodes()
        for node in other.nodes:
            if node.id in node_index:
                node_index[node.id].update(node)
            else:
                result.nodes.append(node)

        for edge in other.edges:
            existing = result.get_edge_by_type(edge.from_, edge.type)
            if existing is None:
                result.edges.append(edge.copy())
                continue
            for dest in edge.to:
                if not existing.points_to(dest):
                    existing.to.append(dest)

        result.clean_edges()

        roots = result._index_root_elements()
        for node_id in other.root_elements:
            if node_id not in roots:
                result.root_elements.append(node_id)
                roots.add(node_id)
        return result

    def equal(self, other: Optional[NodeList]) -> bool:
        """Return True if both lists hold the same roots, edges and node data."""
        if other is None:
            return False
        if (
            len(self.edges) != len(other.edges)
            or len(self.nodes) != len(other.nodes)
            or len(self.root_elements) != len(other.root_elements)
        ):
            return False
        if sorted(self.root_elements) != sorted(other.root_elements):
            return False
        if sorted(e.flat_string() for e in self.edges) != sorted(
            e.flat_string() for e in other.edges
        ):
            return False
        mine = {node.id: node.checksum() for node in self.nodes}
        theirs = {node.id: node.checksum() for node in other.nodes}
        return mine == theirs

    # Relating

    def _first_edge(self, node_id: str, edge_type: EdgeType) -> Optional[Edge]:
        edges = self._index_edges().get(node_id, {}).get(edge_type)
        return edges[0] if edges else None

    def relate_node_at_id(self, node: Node, node_id: str, edge_type: EdgeType) -> None:
        """Relate ``node`` from the existing node ``node_id`` with ``edge_type``.

        The node is added if it is not in the list yet. Raises
        NodeNotFoundError if ``node_id`` is not present.
        """
        node_index = self._index_nodes()
        if node_id not in node_index:
            raise NodeNotFoundError(node_id)

        edge = self._first_edge(node_id, edge_type)
        if edge is None:
            self.edges.append(Edge(type=edge_type, from_=node_id, to=[node.id]))
        else:
            edge.to.append(node.id)

        if node.id not in node_index:
            self.add_node(node)

    def relate_node_list_at_id(
        self, other: NodeList, node_id: str, edge_type: EdgeType
    ) -> None:
        """Attach the roots of ``other`` to node ``node_id`` and merge its graph.

        Nodes already present (by ID) are not duplicated. Raises
        NodeNotFoundError if ``node_id`` is not present.
        """
        node_index = self._index_nodes()
        edge_index = self._index_edges()
        if node_id not in node_index:
            raise NodeNotFoundError(node_id)

        existing = edge_index.get(node_id, {}).get(edge_type)
        if existing:
            existing[0].add_destination_by_id(*other.root_elements)
        else:
            self.edges.append(
                Edge(type=edge_type, from_=node_id, to=list(other.root_elements))
            )

        for node in other.nodes:
            if node.id not in node_index:
                self.add_node(node)

        for edge in other.edges:
            matching = edge_index.get(edge.from_, {}).get(edge.type)
            if matching:
                matching[0].add_destination_by_id(*edge.to)
                continue
            self.edges.append(edge.copy())
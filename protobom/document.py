"""SBOM documents: metadata plus the graph of nodes they describe."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from protobom.node import Node
from protobom.nodelist import NodeList
from protobom.person import Person


@dataclass
class Tool:
    """A tool that took part in producing the SBOM."""

    name: str = ""
    version: str = ""
    vendor: str = ""


@dataclass
class Metadata:
    """Descriptive data about an SBOM document."""

    id: str = ""
    version: str = ""
    name: str = ""
    date: Optional[datetime] = None
    tools: list[Tool] = field(default_factory=list)
    authors: list[Person] = field(default_factory=list)


@dataclass
class Document:
    """A full SBOM: its metadata and its node list."""

    metadata: Metadata = field(default_factory=Metadata)
    node_list: NodeList = field(default_factory=NodeList)

    def get_root_nodes(self) -> list[Node]:
        """Return the top level nodes of the document."""
        return self.node_list.get_root_nodes()


def new_document() -> Document:
    """Create a new empty document at version ``"0"``."""
    return Document(metadata=Metadata(version="0"), node_list=NodeList())
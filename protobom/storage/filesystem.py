"""Directory-based storage backend that keeps one file per document."""

from __future__ import annotations

import hashlib
import json
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Optional

from protobom.document import Document, Metadata, Tool
from protobom.edge import Edge
from protobom.enums import EdgeType, ExternalReferenceType, NodeType, Purpose
from protobom.externalreference import ExternalReference
from protobom.node import Node
from protobom.nodelist import NodeList
from protobom.person import Person
from protobom.storage.base import Backend, RetrieveOptions, StoreOptions


class StorageError(Exception):
    """Raised when a document cannot be stored or retrieved."""


def generate_doc_filename(document_id: str) -> str:
    """Return the file name used to store the document with ``document_id``."""
    if not document_id:
        raise StorageError("unable to generate filename, document ID not set")
    digest = hashlib.sha256(document_id.encode("utf-8")).hexdigest()
    return f"{digest}.protobom"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"cannot serialise {type(value).__name__}")


def _encode(document: Document) -> bytes:
    return json.dumps(asdict(document), default=_json_default, sort_keys=True).encode(
        "utf-8"
    )


def _int_keys(data: dict[str, str]) -> dict[int, str]:
    return {int(key): value for key, value in data.items()}


def _date(value: Optional[str]) -> Optional[datetime]:
    return None if value is None else datetime.fromisoformat(value)


def _person(data: dict[str, Any]) -> Person:
    contacts = data.get("contacts")
    return Person(
        name=data["name"],
        is_org=data["is_org"],
        email=data["email"],
        url=data["url"],
        phone=data["phone"],
        contacts=None if contacts is None else [_person(c) for c in contacts],
    )


def _external_reference(data: dict[str, Any]) -> ExternalReference:
    return ExternalReference(
        url=data["url"],
        type=ExternalReferenceType(data["type"]),
        comment=data["comment"],
        authority=data["authority"],
        hashes=_int_keys(data["hashes"]),
    )


def _node(data: dict[str, Any]) -> Node:
    fields = dict(data)
    fields["type"] = NodeType(data["type"])
    fields["hashes"] = _int_keys(data["hashes"])
    fields["identifiers"] = _int_keys(data["identifiers"])
    fields["primary_purpose"] = [Purpose(p) for p in data["primary_purpose"]]
    fields["suppliers"] = [_person(p) for p in data["suppliers"]]
    fields["originators"] = [_person(p) for p in data["originators"]]
    fields["external_references"] = [
        _external_reference(e) for e in data["external_references"]
    ]
    for name in ("release_date", "build_date", "valid_until_date"):
        fields[name] = _date(data[name])
    return Node(**fields)


def _edge(data: dict[str, Any]) -> Edge:
    return Edge(type=EdgeType(data["type"]), from_=data["from_"], to=list(data["to"]))


def _decode(raw: bytes) -> Document:
    data = json.loads(raw.decode("utf-8"))
    meta = data["metadata"]
    metadata = Metadata(
        id=meta["id"],
        version=meta["version"],
        name=meta["name"],
        date=_date(meta["date"]),
        tools=[Tool(**tool) for tool in meta["tools"]],
        authors=[_person(p) for p in meta["authors"]],
    )
    graph = data["node_list"]
    node_list = NodeList(
        nodes=[_node(n) for n in graph["nodes"]],
        edges=[_edge(e) for e in graph["edges"]],
        root_elements=list(graph["root_elements"]),
    )
    return Document(metadata=metadata, node_list=node_list)


@dataclass
class FileSystem(Backend):
    """Stores documents as files in a directory, keyed by document ID."""

    path: str = ""

    def store(self, document: Document, options: Optional[StoreOptions] = None) -> None:
        """Write ``document`` to the data directory, creating it if needed."""
        if options is None:
            options = StoreOptions()

        if not os.path.exists(self.path):
            try:
                os.makedirs(self.path)
            except OSError as err:
                raise StorageError(
                    "error creating filesystem backend storage directory"
                ) from err
        elif not os.path.isdir(self.path):
            raise StorageError("the specified filesystem backend path is not a directory")

        if document.metadata is None or not document.metadata.id:
            raise StorageError("unable to persist document: no document id set")

        try:
            data = _encode(document)
        except (TypeError, ValueError) as err:
            raise StorageError(f"marshalling protobom document: {err}") from err

        target = os.path.join(self.path, generate_doc_filename(document.metadata.id))
        if options.no_clobber and os.path.exists(target):
            raise StorageError(
                "there is already an entry for the specified document (and no_clobber is set)"
            )

        try:
            with open(target, "wb") as handle:
                handle.write(data)
        except OSError as err:
            raise StorageError(f"writing data to disk: {err}") from err

    def retrieve(
        self, document_id: str, options: Optional[RetrieveOptions] = None
    ) -> Document:
        """Read the document stored under ``document_id`` from the data directory."""
        if not self.path:
            raise StorageError(
                "unable to retrieve SBOM data: filesystem backend data dir not set"
            )
        if not document_id:
            raise StorageError("unable to retrieve SBOM data: no identifier defined")

        target = os.path.join(self.path, generate_doc_filename(document_id))
        try:
            with open(target, "rb") as handle:
                raw = handle.read()
        except OSError as err:
            raise StorageError(f"reading protobom data from disk: {err}") from err

        try:
            return _decode(raw)
        except (ValueError, KeyError, TypeError) as err:
            raise StorageError(f"unmarshaling protobom data: {err}") from err
"""Nodes of the SBOM graph: packages and files with their metadata."""

from __future__ import annotations

import hashlib
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from protobom.enums import HashAlgorithm, NodeType, Purpose, SoftwareIdentifierType
from protobom.externalreference import ExternalReference
from protobom.person import Person

NODE_IDENTIFIER_PREFIX = "protobom"

_PROTOBOM_PREFIXES = frozenset({"auto", "node"})
_INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9.\-]+")
_FIELD_PREFIX = "protobom.protobom.Node."
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_STRING_FIELDS = (
    "id",
    "name",
    "version",
    "file_name",
    "url_home",
    "url_download",
    "license_concluded",
    "license_comments",
    "copyright",
    "source_info",
    "comment",
    "summary",
    "description",
)

_STRING_LIST_FIELDS = ("licenses", "attribution", "file_types")

_DATE_FIELDS = ("release_date", "build_date", "valid_until_date")

# Fields that update() and augment() carry over; id and type never change.
_MERGEABLE_FIELDS = (
    "name",
    "version",
    "file_name",
    "url_home",
    "url_download",
    "licenses",
    "license_concluded",
    "license_comments",
    "copyright",
    "hashes",
    "source_info",
    "primary_purpose",
    "comment",
    "summary",
    "description",
    "attribution",
    "suppliers",
    "originators",
    "release_date",
    "build_date",
    "valid_until_date",
    "external_references",
    "identifiers",
    "file_types",
)


def _unix(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(seconds=1)


def _escape_invalid(match: re.Match[str]) -> str:
    return "".join(f"C{byte}" for byte in match.group(0).encode("utf-8"))


def new_node_identifier(*args: str) -> str:
    """Build a node identifier valid for both CycloneDX and SPDX.

    Leading ``auto`` and ``node`` seeds become known prefixes. Other seeds
    have separators turned into dashes and invalid characters replaced by
    their byte values. Without any usable seed a random UUID is used.
    """
    known = [NODE_IDENTIFIER_PREFIX]
    valid: list[str] = []
    for seed in args:
        if seed in _PROTOBOM_PREFIXES and not valid:
            known.append(seed)
            continue
        for separator in ("/", ":", " "):
            seed = seed.replace(separator, "-")
        seed = _INVALID_ID_CHARS.sub(_escape_invalid, seed)
        if seed:
            valid.append(seed)

    if not valid:
        valid.append(str(uuid.uuid4()))
    valid[0] = "-" + valid[0]
    return "-".join(known + valid)


@dataclass
class Node:
    """A package or file described in an SBOM."""

    id: str = ""
    type: NodeType = NodeType.PACKAGE
    name: str = ""
    version: str = ""
    file_name: str = ""
    url_home: str = ""
    url_download: str = ""
    licenses: list[str] = field(default_factory=list)
    license_concluded: str = ""
    license_comments: str = ""
    copyright: str = ""
    hashes: dict[int, str] = field(default_factory=dict)
    source_info: str = ""
    primary_purpose: list[Purpose] = field(default_factory=list)
    comment: str = ""
    summary: str = ""
    description: str = ""
    attribution: list[str] = field(default_factory=list)
    suppliers: list[Person] = field(default_factory=list)
    originators: list[Person] = field(default_factory=list)
    release_date: Optional[datetime] = None
    build_date: Optional[datetime] = None
    valid_until_date: Optional[datetime] = None
    external_references: list[ExternalReference] = field(default_factory=list)
    identifiers: dict[int, str] = field(default_factory=dict)
    file_types: list[str] = field(default_factory=list)

    def update(self, other: Node) -> None:
        """Overwrite fields with every non-empty value from ``other``."""
        for name in _MERGEABLE_FIELDS:
            value = getattr(other, name)
            if value is not None and (isinstance(value, datetime) or value):
                setattr(self, name, value)

    def augment(self, other: Node) -> None:
        """Fill only the empty fields with values from ``other``."""
        for name in _MERGEABLE_FIELDS:
            current = getattr(self, name)
            if current is not None and (isinstance(current, datetime) or current):
                continue
            value = getattr(other, name)
            if value is not None and (isinstance(value, datetime) or value):
                setattr(self, name, value)

    def copy(self) -> Node:
        """Return a deep copy of the node."""
        return Node(
            id=self.id,
            type=self.type,
            name=self.name,
            version=self.version,
            file_name=self.file_name,
            url_home=self.url_home,
            url_download=self.url_download,
            licenses=list(self.licenses),
            license_concluded=self.license_concluded,
            license_comments=self.license_comments,
            copyright=self.copyright,
            hashes=dict(self.hashes),
            source_info=self.source_info,
            primary_purpose=list(self.primary_purpose),
            comment=self.comment,
            summary=self.summary,
            description=self.description,
            attribution=list(self.attribution),
            suppliers=[p.copy() for p in self.suppliers],
            originators=[p.copy() for p in self.originators],
            release_date=self.release_date,
            build_date=self.build_date,
            valid_until_date=self.valid_until_date,
            external_references=[e.copy() for e in self.external_references],
            identifiers=dict(self.identifiers),
            file_types=list(self.file_types),
        )

    def equal(self, other: Node | None) -> bool:
        """Return True if ``other`` holds the same data as this node."""
        if other is None:
            return False
        return self.flat_string() == other.flat_string()

    def flat_string(self) -> str:
        """Return a deterministic serialisation of the node's data."""
        pairs: list[str] = []

        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value:
                pairs.append(f"{_FIELD_PREFIX}{name}:{value}")

        if self.type:
            pairs.append(f"{_FIELD_PREFIX}type:{int(self.type)}")

        for name in _STRING_LIST_FIELDS:
            values = getattr(self, name)
            if values:
                pairs.append(_flat_list(name, [str(v) for v in values]))

        if self.primary_purpose:
            pairs.append(
                _flat_list("primary_purpose", [str(int(p)) for p in self.primary_purpose])
            )

        if self.hashes:
            by_key = {str(int(k)): v for k, v in self.hashes.items()}
            pairs.append(
                f"{_FIELD_PREFIX}hashes:"
                + "".join(f"{k}:{by_key[k]}" for k in sorted(by_key))
            )

        for name in _DATE_FIELDS:
            moment = getattr(self, name)
            if moment is not None:
                pairs.append(f"{_FIELD_PREFIX}{name}:{_unix(moment)}")

        pairs.extend(f"extref:{e.flat_string()}" for e in self.external_references)
        pairs.extend(f"supplier:{p.flat_string()}" for p in self.suppliers)
        pairs.extend(f"originator:{p.flat_string()}" for p in self.originators)

        for key in sorted(int(k) for k in self.identifiers):
            pairs.append(f"identifiers[{key}]:{self.identifiers[key]}")

        return ":".join(sorted(pairs))

    def checksum(self) -> str:
        """Return the hex SHA-256 digest of the node's flat string."""
        return hashlib.sha256(self.flat_string().encode("utf-8")).hexdigest()

    def purl(self) -> str:
        """Return the node's package URL, or an empty string for files."""
        if self.type == NodeType.FILE:
            return ""
        return self.identifiers.get(int(SoftwareIdentifierType.PURL), "")

    def hashes_match(self, hashes: dict[int, str]) -> bool:
        """Check ``hashes`` against the node's, on algorithms both have.

        Returns False if either side is empty, if any shared algorithm
        differs, or if no algorithm is shared.
        """
        if not self.hashes or not hashes:
            return False
        matched = False
        for algorithm, value in hashes.items():
            if algorithm not in self.hashes:
                continue
            if self.hashes[algorithm] != value:
                return False
            matched = True
        return matched

    def add_hash(self, algorithm: HashAlgorithm, value: str) -> None:
        """Set the hash for ``algorithm``; empty values are ignored."""
        if not value:
            return
        self.hashes[int(algorithm)] = value


def _flat_list(name: str, values: list[str]) -> str:
    return "".join(
        f"{_FIELD_PREFIX}{name}[{i}]:{v}" for i, v in enumerate(sorted(values))
    )
"""External references attached to SBOM nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from protobom.enums import ExternalReferenceType


@dataclass
class ExternalReference:
    """A link from a node to an outside resource."""

    url: str = ""
    type: ExternalReferenceType = ExternalReferenceType.UNKNOWN
    comment: str = ""
    authority: str = ""
    hashes: dict[int, str] = field(default_factory=dict)

    def flat_string(self) -> str:
        """Return a deterministic serialisation suitable for indexing."""
        ret = f"(t){int(self.type)}"
        if self.url:
            ret += f"(u){self.url}"
        if self.comment:
            ret += f"(c){self.comment}"
        if self.authority:
            ret += f"(a){self.authority}"
        return ret

    def copy(self) -> ExternalReference:
        """Return an independent duplicate of this reference."""
        return ExternalReference(
            url=self.url,
            type=self.type,
            comment=self.comment,
            authority=self.authority,
            hashes=dict(self.hashes),
        )
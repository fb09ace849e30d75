"""People and organisations that take part in an SBOM."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SPDX_ORGANIZATION = "Organization"
SPDX_PERSON = "Person"


@dataclass
class Person:
    """A person or organisation, optionally with contacts of its own."""

    name: str = ""
    is_org: bool = False
    email: str = ""
    url: str = ""
    phone: str = ""
    contacts: Optional[list[Person]] = None

    def to_spdx2_client_string(self) -> str:
        """Return the actor string used by SPDX 2 tooling."""
        if self.email:
            return f"{self.name} ({self.email})"
        return self.name

    def to_spdx2_client_org(self) -> str:
        """Return the SPDX 2 actor type: ``Organization`` or ``Person``."""
        return SPDX_ORGANIZATION if self.is_org else SPDX_PERSON

    def flat_string(self) -> str:
        """Return a deterministic serialisation suitable for comparisons."""
        parts = [f"n({self.name})o({'true' if self.is_org else 'false'})"]
        if self.email:
            parts.append(f"email({self.email})")
        if self.url:
            parts.append(f"url({self.url})")
        if self.phone:
            parts.append(f"p({self.phone})")
        if self.contacts is not None:
            parts.append("c(" + "".join(c.flat_string() for c in self.contacts) + ")")
        return "".join(parts)

    def copy(self) -> Person:
        """Return a deep copy, recursing into the contacts."""
        return Person(
            name=self.name,
            is_org=self.is_org,
            email=self.email,
            url=self.url,
            phone=self.phone,
            contacts=None if self.contacts is None else [c.copy() for c in self.contacts],
        )
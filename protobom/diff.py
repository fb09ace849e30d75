"""Field by field comparison of nodes and of the values they hold."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, TypeVar

from protobom.node import Node

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

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
_SLICE_FIELDS = ("primary_purpose", "licenses", "attribution", "file_types")
_DATE_FIELDS = ("release_date", "build_date", "valid_until_date")
_LIST_FIELDS = ("suppliers", "originators", "external_references")
_MAP_FIELDS = ("identifiers", "hashes")


class _Flattenable(Protocol):
    def flat_string(self) -> str: ...


F = TypeVar("F", bound=_Flattenable)


@dataclass
class NodeDiff:
    """What changed between two nodes: data added, data removed and a count."""

    added: Node = field(default_factory=Node)
    removed: Node = field(default_factory=Node)
    diff_count: int = 0


def diff_value(old: Any, new: Any) -> tuple[Any, Any, int]:
    """Compare two scalar values such as strings.

    Returns ``(added, removed, count)``: the new value as added when it
    changed to something non-empty, the old value as removed when it was
    blanked, and the zero value of the type elsewhere.
    """
    if old == new:
        zero = type(old)()
        return zero, zero, 0
    if not new:
        return new, old, 1
    return new, type(new)(), 1


def _seconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return math.floor(moment.timestamp())


def diff_dates(
    old: Optional[datetime], new: Optional[datetime]
) -> tuple[Optional[datetime], Optional[datetime], int]:
    """Compare two dates at one-second resolution.

    A changed or newly set date is returned as added; a date that was
    unset is returned as removed.
    """
    if new is not None and (old is None or _seconds(old) != _seconds(new)):
        return new, None, 1
    if old is not None and new is None:
        return None, old, 1
    return None, None, 0


def diff_map(old: dict[K, V], new: dict[K, V]) -> tuple[dict[K, V], dict[K, V], int]:
    """Return entries added or changed in ``new`` and keys dropped from ``old``."""
    added = {k: v for k, v in new.items() if k not in old or old[k] != v}
    removed = {k: v for k, v in old.items() if k not in new}
    return added, removed, 1 if added or removed else 0


def diff_slice(old: list[T], new: list[T]) -> tuple[list[T], list[T], int]:
    """Return elements only in ``new`` and elements only in ``old``."""
    added = [item for item in new if item not in old]
    removed = [item for item in old if item not in new]
    return added, removed, 1 if added or removed else 0


def diff_list(old: list[F], new: list[F]) -> tuple[list[F], list[F], int]:
    """Like diff_slice, comparing elements by their flat string."""
    old_keys = {item.flat_string() for item in old}
    new_keys = {item.flat_string() for item in new}
    added = [item for item in new if item.flat_string() not in old_keys]
    removed = [item for item in old if item.flat_string() not in new_keys]
    return added, removed, 1 if added or removed else 0


def diff_nodes(old: Node, new: Node) -> Optional[NodeDiff]:
    """Return what differs in ``new`` with respect to ``old``, or None if nothing."""
    result = NodeDiff()

    def record(name: str, outcome: tuple[Any, Any, int]) -> None:
        added, removed, count = outcome
        setattr(result.added, name, added)
        setattr(result.removed, name, removed)
        result.diff_count += count

    for name in _STRING_FIELDS:
        record(name, diff_value(getattr(old, name), getattr(new, name)))

    if old.type != new.type:
        result.added.type = new.type
        result.diff_count += 1

    for name in _SLICE_FIELDS:
        record(name, diff_slice(getattr(old, name), getattr(new, name)))
    for name in _DATE_FIELDS:
        record(name, diff_dates(getattr(old, name), getattr(new, name)))
    for name in _LIST_FIELDS:
        record(name, diff_list(getattr(old, name), getattr(new, name)))
    for name in _MAP_FIELDS:
        record(name, diff_map(getattr(old, name), getattr(new, name)))

    return result if result.diff_count > 0 else None
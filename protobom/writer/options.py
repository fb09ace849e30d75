"""Options that control how documents are serialised, rendered and stored."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from protobom.storage.base import StoreOptions


@dataclass
class RenderOptions:
    """Options for rendering a native document to a stream."""

    indent: int = 0


@dataclass
class SerializeOptions:
    """Options for converting a document into a native format."""


def _options_key(key: Any) -> str:
    """Use strings as they are and any other object by its type name."""
    if isinstance(key, str):
        return key
    kind = type(key)
    return f"{kind.__module__}.{kind.__qualname__}"


@dataclass
class WriterOptions:
    """The full option set of a writer."""

    format: str = ""
    render_options: Optional[RenderOptions] = None
    serialize_options: Optional[SerializeOptions] = None
    store_options: Optional[StoreOptions] = None
    _format_options: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def get_format_options(self, key: Any) -> Any:
        """Return the options set for ``key`` (a string or a serializer), or None."""
        return self._format_options.get(_options_key(key))

    def set_format_options(self, key: Any, options: Any) -> None:
        """Set options for ``key``; an empty string key is ignored."""
        name = _options_key(key)
        if not name:
            return
        self._format_options[name] = options
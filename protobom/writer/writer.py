"""Writing documents to native formats and persisting them to storage."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import IO, Any, Optional

from protobom.document import Document
from protobom.storage.base import Backend, StoreOptions
from protobom.storage.filesystem import FileSystem
from protobom.writer.options import RenderOptions, SerializeOptions, WriterOptions


class WriterError(Exception):
    """Raised when a document cannot be written or stored."""


class Serializer(ABC):
    """Converts documents to a native SBOM format and renders them."""

    @abstractmethod
    def serialize(
        self, document: Document, options: SerializeOptions, format_options: Any
    ) -> Any:
        """Return the native representation of ``document``."""

    @abstractmethod
    def render(
        self,
        native_document: Any,
        stream: IO[bytes],
        options: RenderOptions,
        format_options: Any,
    ) -> None:
        """Write ``native_document`` to ``stream``."""


_registry_lock = threading.RLock()
_serializers: dict[str, Optional[Serializer]] = {}


def _default_options() -> WriterOptions:
    return WriterOptions(
        render_options=RenderOptions(indent=4),
        serialize_options=SerializeOptions(),
        store_options=StoreOptions(),
    )


def register_serializer(fmt: str, serializer: Optional[Serializer]) -> None:
    """Register ``serializer`` for ``fmt``, replacing any earlier one."""
    with _registry_lock:
        _serializers[fmt] = serializer


def unregister_serializer(fmt: str) -> None:
    """Remove the serializer registered for ``fmt``, if any."""
    with _registry_lock:
        _serializers.pop(fmt, None)


def get_format_serializer(fmt: str) -> Optional[Serializer]:
    """Return the serializer registered for ``fmt``.

    Raises WriterError if ``fmt`` is empty or has no serializer.
    """
    if not fmt:
        raise WriterError("unable to find serializer, no format specified")
    with _registry_lock:
        if fmt in _serializers:
            return _serializers[fmt]
    raise WriterError(f"no serializer registered for {fmt}")


class Writer:
    """Writes documents in native formats and stores them in a backend."""

    def __init__(
        self,
        *,
        format: str = "",
        render_options: Optional[RenderOptions] = None,
        serialize_options: Optional[SerializeOptions] = None,
        store_options: Optional[StoreOptions] = None,
        format_options: Optional[Mapping[Any, Any]] = None,
        storage: Optional[Backend] = None,
    ) -> None:
        self.storage: Optional[Backend] = storage if storage is not None else FileSystem()
        self.options = _default_options()
        self.options.format = format
        if render_options is not None:
            self.options.render_options = render_options
        if serialize_options is not None:
            self.options.serialize_options = serialize_options
        if store_options is not None:
            self.options.store_options = store_options
        for key, value in (format_options or {}).items():
            self.options.set_format_options(key, value)

    def write_stream_with_options(
        self, document: Optional[Document], stream: IO[bytes], options: WriterOptions
    ) -> None:
        """Serialise ``document`` and render it to ``stream`` using ``options``."""
        if document is None:
            raise WriterError("unable to write sbom to stream, SBOM is nil")

        fmt = options.format or self.options.format
        try:
            serializer = get_format_serializer(fmt)
        except WriterError as err:
            raise WriterError(f"getting serializer: {err}") from err
        if serializer is None:
            raise WriterError(f"getting serializer: no serializer set for {fmt}")

        defaults = _default_options()
        serialize_options = options.serialize_options or defaults.serialize_options
        render_options = options.render_options or defaults.render_options
        format_options = options.get_format_options(serializer)

        try:
            native = serializer.serialize(document, serialize_options, format_options)
        except Exception as err:
            raise WriterError(f"serializing SBOM to native format: {err}") from err

        try:
            serializer.render(native, stream, render_options, format_options)
        except Exception as err:
            raise WriterError(f"writing rendered document: {err}") from err

    def write_stream(self, document: Optional[Document], stream: IO[bytes]) -> None:
        """Write ``document`` to ``stream`` with the writer's own options."""
        self.write_stream_with_options(document, stream, self.options)

    def write_file_with_options(
        self, document: Optional[Document], path: str, options: WriterOptions
    ) -> None:
        """Write ``document`` to the file at ``path``, truncating it if it exists."""
        with open(path, "wb") as handle:
            self.write_stream_with_options(document, handle, options)

    def write_file(self, document: Optional[Document], path: str) -> None:
        """Write ``document`` to ``path`` with the writer's own options."""
        self.write_file_with_options(document, path, self.options)

    def store(self, document: Optional[Document]) -> None:
        """Persist ``document`` with the default options."""
        self.store_with_options(document, _default_options())

    def store_with_options(
        self, document: Optional[Document], options: WriterOptions
    ) -> None:
        """Persist ``document`` in the configured storage backend."""
        if document is None:
            raise WriterError("writing document: no document given")
        if self.storage is None:
            raise WriterError("no storage backend configured")
        try:
            self.storage.store(document, options.store_options)
        except Exception as err:
            raise WriterError(f"calling backend store: {err}") from err
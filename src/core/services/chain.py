"""Chain building and inspection.

Why a service:
- The CLI only parses options; scripts and tests build the same chains here.
- Layer names from config map to decorator classes in one place.

A chain is linear: each decorator exposes its single
`wrappee`; the walk stops at the first participant without one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, Sequence

from adapters.decorators import CompressionDecorator, DataSourceDecorator, EncryptionDecorator
from adapters.decorators.encryption import DEFAULT_DECRYPT_MARKER
from adapters.file_source import FileDataSource
from core.config import AppSettings
from core.domain.layers import LayerKind
from core.domain.models import ChainDescription, LayerInfo
from core.interfaces.data_source import DataSource

logger = logging.getLogger(__name__)


def _layer_factories(decrypt_marker: str) -> dict[LayerKind, Callable[[DataSource], DataSource]]:
    return {
        LayerKind.COMPRESSION: CompressionDecorator,
        LayerKind.ENCRYPTION: lambda inner: EncryptionDecorator(inner, marker=decrypt_marker),
    }


def build_chain(
    source: DataSource,
    layers: Sequence[LayerKind | str],
    *,
    decrypt_marker: str = DEFAULT_DECRYPT_MARKER,
) -> DataSource:
    """Wrap `source` with one decorator per entry of `layers`.

    The first entry ends up innermost, the last one outermost:
    `[compression, encryption]` gives `Encryption(Compression(source))`.
    An empty sequence returns `source` itself.
    """

    factories = _layer_factories(decrypt_marker)
    data_source = source
    for layer in layers:
        kind = LayerKind.parse(layer)
        data_source = factories[kind](data_source)
    logger.debug("Built chain: %r", data_source)
    return data_source


def build_chain_from_settings(
    settings: AppSettings | None = None,
    *,
    path: Path | None = None,
    layers: Sequence[LayerKind | str] | None = None,
) -> DataSource:
    """Build the configured file-backed chain; `path`/`layers` override settings."""

    settings = settings or AppSettings()
    source = FileDataSource.from_settings(settings, path=path)
    return build_chain(
        source,
        settings.layers if layers is None else layers,
        decrypt_marker=settings.decrypt_marker,
    )


def iter_chain(data_source: DataSource) -> Iterator[DataSource]:
    """Yield every participant, outermost first, ending with the concrete source."""

    seen: set[int] = set()
    current: DataSource | None = data_source
    while current is not None:
        if id(current) in seen:
            raise ValueError(f"Cycle detected in data source chain at {type(current).__name__}")
        seen.add(id(current))
        yield current
        current = current.wrappee if isinstance(current, DataSourceDecorator) else None


def terminal_source(data_source: DataSource) -> DataSource:
    """Return the innermost participant of the chain."""

    last = data_source
    for last in iter_chain(data_source):
        pass
    return last


def describe_chain(data_source: DataSource) -> ChainDescription:
    participants: list[LayerInfo] = []
    for depth, item in enumerate(iter_chain(data_source)):
        kind = item.kind if isinstance(item, DataSourceDecorator) else None
        participants.append(LayerInfo(name=type(item).__name__, kind=kind, depth=depth))

    inner = terminal_source(data_source)
    location = str(inner.path) if isinstance(inner, FileDataSource) else None
    return ChainDescription(participants=participants, location=location)

"""Compression layer (placeholder).

`compress` and `decompress` are identities; the layer only shows where a real
codec would sit in the chain.
"""

from __future__ import annotations

import logging

from adapters.decorators.base import DataSourceDecorator
from core.domain.layers import LayerKind

logger = logging.getLogger(__name__)


class CompressionDecorator(DataSourceDecorator):
    kind = LayerKind.COMPRESSION

    def compress(self, text: str) -> str:
        return text

    def decompress(self, text: str) -> str:
        return text

    def write_data(self, text: str) -> None:
        logger.debug("Compressing data: %s", text)
        self.wrappee.write_data(self.compress(text))

    def read_data(self) -> str:
        data = self.wrappee.read_data()
        logger.debug("Decompressing data: %s", data)
        return self.decompress(data)

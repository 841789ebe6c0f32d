"""Encryption layer (placeholder).

No cipher is applied. Writes emit an `Encrypting data: ...` annotation and
forward the text unchanged; reads prepend a marker to the inner result.
"""

from __future__ import annotations

import logging

from adapters.decorators.base import DataSourceDecorator
from core.domain.layers import LayerKind
from core.interfaces.data_source import DataSource

logger = logging.getLogger(__name__)

DEFAULT_DECRYPT_MARKER = "Decrypted data: "


class EncryptionDecorator(DataSourceDecorator):
    """Annotates writes and marks reads as decrypted."""

    kind = LayerKind.ENCRYPTION

    def __init__(self, wrappee: DataSource, *, marker: str = DEFAULT_DECRYPT_MARKER) -> None:
        super().__init__(wrappee)
        self._marker = marker

    @property
    def marker(self) -> str:
        return self._marker

    def write_data(self, text: str) -> None:
        logger.info("Encrypting data: %s", text)
        self.wrappee.write_data(text)

    def read_data(self) -> str:
        return self._marker + self.wrappee.read_data()

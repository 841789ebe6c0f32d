"""Read/write contract shared by every participant of a chain.

A chain is a linear sequence of decorators ending in exactly one concrete
source.

Why Protocol:
- Structural contract: the file source, the decorators and test doubles
  satisfy it without a shared base class.
- Callers never know how many layers sit between them and the backing store.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DataSource(Protocol):
    """Minimal capability: replace the stored text, read it back.

    Design rules:
    - `write_data` replaces the whole content; there is no append.
    - `read_data` returns the current content as seen from this layer.
    - Errors from the backing store propagate unchanged.
    """

    def write_data(self, text: str) -> None:
        """Store `text`, replacing whatever was stored before."""

        ...

    def read_data(self) -> str:
        """Return the stored text."""

        ...

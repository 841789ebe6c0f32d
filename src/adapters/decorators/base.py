"""Forwarding base for decorators."""

from __future__ import annotations

from typing import ClassVar

from core.domain.layers import LayerKind
from core.interfaces.data_source import DataSource


class DataSourceDecorator(DataSource):
    """Holds one wrapped source and forwards both operations to it unchanged.

    Subclasses override `write_data` / `read_data` to transform the text
    around the delegation. Every override performs exactly one call on the
    wrappee and lets its errors through.
    """

    kind: ClassVar[LayerKind | None] = None

    def __init__(self, wrappee: DataSource) -> None:
        if not isinstance(wrappee, DataSource):
            raise TypeError(
                f"{type(self).__name__} must wrap a DataSource, got {type(wrappee).__name__}"
            )
        self._wrappee = wrappee

    @property
    def wrappee(self) -> DataSource:
        return self._wrappee

    def write_data(self, text: str) -> None:
        self._wrappee.write_data(text)

    def read_data(self) -> str:
        return self._wrappee.read_data()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrappee!r})"

"""Decorators around a `DataSource`.

Each module wraps exactly one inner source and implements
`core.interfaces.data_source.DataSource` itself, so layers nest freely.
"""

from adapters.decorators.base import DataSourceDecorator
from adapters.decorators.compression import CompressionDecorator
from adapters.decorators.encryption import EncryptionDecorator

__all__ = [
    "CompressionDecorator",
    "DataSourceDecorator",
    "EncryptionDecorator",
]

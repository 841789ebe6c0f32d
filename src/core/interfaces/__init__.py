"""Core interfaces.

Contracts (Protocol) implemented by the concrete source and by every
decorator in `adapters`.
"""

from core.interfaces.data_source import DataSource

__all__ = ["DataSource"]

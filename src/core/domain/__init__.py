"""Domain types.

Plain enums and pydantic models; the domain knows nothing about files or the CLI.
"""

from core.domain.layers import LayerKind
from core.domain.models import ChainDescription, LayerInfo

__all__ = ["ChainDescription", "LayerInfo", "LayerKind"]

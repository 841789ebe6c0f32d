"""Layer kinds known to the chain builder.

Configuration and the CLI name layers by these values; the mapping to
decorator classes lives in `core.services.chain`.
"""

from __future__ import annotations

from enum import Enum


class LayerKind(str, Enum):
    """Decorator kinds that can wrap a data source."""

    COMPRESSION = "compression"
    ENCRYPTION = "encryption"

    @classmethod
    def default_stack(cls) -> list["LayerKind"]:
        """Layer order of the demonstration chain, innermost first."""

        return [cls.COMPRESSION, cls.ENCRYPTION]

    @classmethod
    def parse(cls, value: "str | LayerKind") -> "LayerKind":
        """Resolve a user supplied name (case-insensitive)."""

        if isinstance(value, LayerKind):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown layer {value!r} (expected one of: {choices})") from None

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.capitalize()

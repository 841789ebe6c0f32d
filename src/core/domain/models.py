"""Domain models (Pydantic v2).

These models describe *what* a chain looks like, not how it reads or writes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.domain.layers import LayerKind


class LayerInfo(BaseModel):
    """One participant of a chain."""

    name: str = Field(
        ...,
        min_length=1,
        description="Class name of the participant (e.g. 'EncryptionDecorator').",
    )
    kind: LayerKind | None = Field(
        default=None,
        description="Layer kind for decorators; None for the concrete source.",
    )
    depth: int = Field(
        ...,
        ge=0,
        description="Position in the chain, 0 being the outermost participant.",
    )


class ChainDescription(BaseModel):
    """Snapshot of a chain, outermost participant first.

    The last entry of `participants` is always the concrete source.
    """

    participants: list[LayerInfo] = Field(
        default_factory=list,
        description="Every participant from the outermost decorator to the source.",
    )
    location: str | None = Field(
        default=None,
        description="Backing location of the concrete source, if it has one.",
    )

    @property
    def layers(self) -> list[LayerKind]:
        """Decorator kinds only, outermost first."""

        return [p.kind for p in self.participants if p.kind is not None]

    @property
    def source(self) -> LayerInfo:
        return self.participants[-1]

"""JSON export of a chain description.

Why JSON:
- Other tools can check which layers wrap a file without importing this package.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ChainDescription


def chain_to_json(description: ChainDescription) -> str:
    """Serialize `description` as UTF-8 JSON with a stable layout."""

    payload = description.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_chain_json(*, description: ChainDescription, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(chain_to_json(description), encoding="utf-8")
    return output_path

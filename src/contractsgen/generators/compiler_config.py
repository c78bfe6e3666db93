from __future__ import annotations

from typing import Any, Sequence

from .base import GenerationInput, dumps_compact


def merge_compiler_config(record: dict[str, Any], contracts: Sequence[str]) -> dict[str, Any]:
    merged = dict(record)
    merged["contracts"] = sorted(contracts)
    return merged


def render(source: GenerationInput, existing: dict[str, Any] | None) -> str:
    return dumps_compact(merge_compiler_config(existing or {}, source.contracts))

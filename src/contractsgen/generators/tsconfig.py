from __future__ import annotations

from typing import Any, Sequence

from ..naming import contract_name, join_posix
from .base import GenerationInput, dumps_compact


def artifact_files(contracts: Sequence[str], artifacts_dir: str) -> list[str]:
    return sorted(join_posix(artifacts_dir, f"{contract_name(contract)}.json") for contract in contracts)


def merge_tsconfig(record: dict[str, Any], contracts: Sequence[str], artifacts_dir: str) -> dict[str, Any]:
    merged = dict(record)
    merged["files"] = artifact_files(contracts, artifacts_dir)
    return merged


def render(source: GenerationInput, existing: dict[str, Any] | None) -> str:
    return dumps_compact(merge_tsconfig(existing or {}, source.contracts, source.artifacts_dir))

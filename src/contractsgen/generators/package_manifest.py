from __future__ import annotations

from typing import Any, Sequence

from ..errors import ConfigShapeError
from ..naming import contract_name
from .base import AUTO_GENERATED_BANNER_FOR_LISTS, GenerationInput, dumps_compact

ABIS_KEY = "abis"
ABIS_COMMENT_KEY = "abis:comment"


def abi_glob(contracts: Sequence[str], artifacts_dir: str) -> str:
    names = sorted(contract_name(contract) for contract in contracts)
    return f"{artifacts_dir}/@({'|'.join(names)}).json"


def merge_package_manifest(record: dict[str, Any], contracts: Sequence[str], artifacts_dir: str) -> dict[str, Any]:
    config = record.get("config")
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigShapeError(f"package.json: `config` must be an object, got {type(config).__name__}")
    merged = dict(record)
    merged["config"] = {
        **config,
        ABIS_COMMENT_KEY: AUTO_GENERATED_BANNER_FOR_LISTS,
        ABIS_KEY: abi_glob(contracts, artifacts_dir),
    }
    return merged


def render(source: GenerationInput, existing: dict[str, Any] | None) -> str:
    return dumps_compact(merge_package_manifest(existing or {}, source.contracts, source.artifacts_dir))

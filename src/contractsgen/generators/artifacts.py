"""`src/artifacts.ts`: one imported artifact object per contract."""

from __future__ import annotations

from typing import Any, Sequence

from ..naming import contract_name, join_posix
from .base import GenerationInput, banner_comment

ARTIFACT_TYPE = "ContractArtifact"
ARTIFACT_TYPE_MODULE = "ethereum-types"
DEFAULT_ASSERTION = "{name} as {artifact_type}"

# Artifacts that do not match the current artifact type; keyed by contract name.
ARTIFACT_ASSERTION_OVERRIDES: dict[str, str] = {
    "ZRXToken": "({name} as any) as {artifact_type}",
}


def artifact_import_path(name: str, artifacts_dir: str) -> str:
    return join_posix("..", artifacts_dir, f"{name}.json")


def artifact_import(name: str, artifacts_dir: str) -> str:
    return f"import * as {name} from '{artifact_import_path(name, artifacts_dir)}';"


def artifact_entry(name: str, overrides: dict[str, str] | None = None) -> str:
    template = (ARTIFACT_ASSERTION_OVERRIDES if overrides is None else overrides).get(name, DEFAULT_ASSERTION)
    return f"{name}: {template.format(name=name, artifact_type=ARTIFACT_TYPE)},"


def render_artifacts_barrel(contracts: Sequence[str], artifacts_dir: str) -> str:
    names = [contract_name(contract) for contract in contracts]
    # sorted on the statement text, not on the contract name
    imports = sorted(artifact_import(name, artifacts_dir) for name in names)
    lines = [banner_comment(), f"import {{ {ARTIFACT_TYPE} }} from '{ARTIFACT_TYPE_MODULE}';", "", *imports]
    entries = [artifact_entry(name) for name in names]
    if entries:
        lines.extend(["export const artifacts = {", *entries, "};"])
    else:
        lines.append("export const artifacts = {};")
    return "\n".join(lines) + "\n"


def render(source: GenerationInput, existing: dict[str, Any] | None) -> str:
    return render_artifacts_barrel(source.contracts, source.artifacts_dir)

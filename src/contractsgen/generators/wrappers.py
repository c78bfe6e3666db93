"""`src/wrappers.ts`: re-exports of the generated contract wrappers."""

from __future__ import annotations

from typing import Any, Sequence

from ..naming import contract_name, join_posix, make_output_file_name
from .base import GenerationInput, banner_comment


def wrapper_export(name: str, wrappers_dir: str) -> str:
    return f"export * from '{join_posix('..', wrappers_dir, make_output_file_name(name))}';"


def render_wrappers_barrel(contracts: Sequence[str], wrappers_dir: str) -> str:
    exports = sorted(wrapper_export(contract_name(contract), wrappers_dir) for contract in contracts)
    return "\n".join([banner_comment(), *exports]) + "\n"


def render(source: GenerationInput, existing: dict[str, Any] | None) -> str:
    return render_wrappers_barrel(source.contracts, source.wrappers_dir)

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

from ..context import PackageLayout

AUTO_GENERATED_BANNER = "This file is auto-generated by contracts-gen. Don't edit manually."
AUTO_GENERATED_BANNER_FOR_LISTS = "This list is auto-generated by contracts-gen. Don't edit manually."


@dataclass(frozen=True)
class GenerationInput:
    """Normalized contract paths plus the directories the outputs point at."""

    contracts: tuple[str, ...]
    contracts_dir: str
    artifacts_dir: str
    wrappers_dir: str


RenderFunc = Callable[[GenerationInput, "dict[str, Any] | None"], str]


@dataclass(frozen=True)
class GeneratorDef:
    generator_id: str
    layout_field: str
    render: RenderFunc
    merges_existing: bool = False

    def target(self, layout: PackageLayout) -> str:
        return str(getattr(layout, self.layout_field))


def dumps_compact(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def banner_comment() -> str:
    return f"// {AUTO_GENERATED_BANNER}"

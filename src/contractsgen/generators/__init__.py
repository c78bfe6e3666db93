from __future__ import annotations

from . import artifacts, compiler_config, package_manifest, tsconfig, wrappers
from .base import GenerationInput, GeneratorDef

GENERATORS: tuple[GeneratorDef, ...] = (
    GeneratorDef("compiler-config", "compiler_config", compiler_config.render, merges_existing=True),
    GeneratorDef("artifacts", "artifacts_module", artifacts.render),
    GeneratorDef("wrappers", "wrappers_module", wrappers.render),
    GeneratorDef("tsconfig", "tsconfig", tsconfig.render, merges_existing=True),
    GeneratorDef("package-manifest", "package_manifest", package_manifest.render, merges_existing=True),
)


def generator_ids() -> list[str]:
    return [gen.generator_id for gen in GENERATORS]


__all__ = ["GENERATORS", "GenerationInput", "GeneratorDef", "generator_ids"]

"""Read compiler.json once, render every output, then write.

Loading, name resolution, input parsing, rendering and formatting all finish
before the first write, so config, resolution and format failures leave the
package untouched. Writes are not rolled back when a later write fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import CompilerConfig, load_compiler_config, parse_json_record
from .context import RunContext
from .errors import GeneratorIOError
from .formatter import FormatOptions, Formatter, build_formatter, resolve_format_options
from .fs import atomic_write_text, read_text_if_exists
from .generators import GENERATORS, GenerationInput, GeneratorDef
from .logging import log_event
from .normalize import normalize_contracts
from .resolver import NameResolver


@dataclass(frozen=True)
class GeneratedFile:
    generator_id: str
    path: Path
    relative_path: str
    content: str
    previous: str | None

    @property
    def changed(self) -> bool:
        return self.content != self.previous


@dataclass(frozen=True)
class GenerationReport:
    mode: str
    contracts: tuple[str, ...]
    files: tuple[GeneratedFile, ...]

    @property
    def stale(self) -> tuple[GeneratedFile, ...]:
        return tuple(f for f in self.files if f.changed)

    @property
    def ok(self) -> bool:
        return self.mode == "write" or not self.stale


def prepare_input(ctx: RunContext) -> GenerationInput:
    config: CompilerConfig = load_compiler_config(ctx.path(ctx.layout.compiler_config))
    contracts_dir = ctx.path(config.contracts_dir)
    resolver = NameResolver(contracts_dir)

    def _resolve(name: str) -> str:
        path = resolver.resolve(name).path
        log_event(ctx, "debug", "normalize", "resolve", contract=name, path=path)
        return path

    contracts = normalize_contracts(config.contracts, contracts_dir, resolve=_resolve)
    log_event(
        ctx,
        "info",
        "normalize",
        "contracts",
        count=len(contracts),
        contracts_dir=config.contracts_dir,
        artifacts_dir=config.artifacts_dir,
    )
    return GenerationInput(
        contracts=tuple(contracts),
        contracts_dir=config.contracts_dir,
        artifacts_dir=config.artifacts_dir,
        wrappers_dir=ctx.layout.wrappers_dir,
    )


def render_file(
    ctx: RunContext,
    gen: GeneratorDef,
    source: GenerationInput,
    formatter: Formatter,
    options: FormatOptions,
) -> GeneratedFile:
    relative = gen.target(ctx.layout)
    path = ctx.path(relative)
    previous = read_text_if_exists(path)
    existing = None
    if gen.merges_existing:
        if previous is None:
            raise GeneratorIOError(f"{relative} not found in {ctx.package_dir}; it is merged, not created")
        existing = parse_json_record(previous, source=relative)
    content = formatter.format(gen.render(source, existing), relative, options)
    log_event(ctx, "debug", "generate", "render", generator=gen.generator_id, path=relative, bytes=len(content))
    return GeneratedFile(gen.generator_id, path, relative, content, previous)


def plan_generation(
    ctx: RunContext,
    formatter: Formatter | None = None,
    options: FormatOptions | None = None,
) -> tuple[GenerationInput, list[GeneratedFile]]:
    source = prepare_input(ctx)
    active_formatter = formatter or build_formatter(ctx.formatter, ctx.package_dir)
    active_options = options or resolve_format_options(ctx.package_dir)
    log_event(
        ctx,
        "debug",
        "format",
        "options",
        formatter=active_formatter.name,
        source=active_options.source or "<defaults>",
        tab_width=active_options.tab_width,
        use_tabs=active_options.use_tabs,
    )
    files = [render_file(ctx, gen, source, active_formatter, active_options) for gen in GENERATORS]
    return source, files


def run_generation(
    ctx: RunContext,
    formatter: Formatter | None = None,
    options: FormatOptions | None = None,
) -> GenerationReport:
    source, files = plan_generation(ctx, formatter, options)
    if ctx.check:
        report = GenerationReport("check", source.contracts, tuple(files))
        for stale in report.stale:
            log_event(ctx, "warn", "check", "stale", generator=stale.generator_id, path=stale.relative_path)
        return report
    for generated in files:
        atomic_write_text(generated.path, generated.content)
        log_event(
            ctx,
            "info",
            "generate",
            "write",
            generator=generated.generator_id,
            path=generated.relative_path,
            changed=generated.changed,
        )
    return GenerationReport("write", source.contracts, tuple(files))

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from .naming import is_source_path
from .resolver import NameResolver

ResolveFunc = Callable[[str], str]


def path_resolver(contracts_dir: Path) -> ResolveFunc:
    resolver = NameResolver(contracts_dir)

    def _resolve(name: str) -> str:
        return resolver.resolve(name).path

    return _resolve


def normalize_reference(reference: str, resolve: ResolveFunc) -> str:
    if is_source_path(reference):
        return reference
    return resolve(reference)


def normalize_contracts(
    references: Iterable[str],
    contracts_dir: Path,
    resolve: ResolveFunc | None = None,
) -> list[str]:
    """Resolve bare names to paths and sort on the resulting path strings."""
    active = resolve or path_resolver(contracts_dir)
    return sorted(normalize_reference(ref, active) for ref in references)

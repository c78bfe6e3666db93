from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .errors import ContractNotFoundError, GeneratorIOError, ResolutionError
from .naming import SOLIDITY_EXTENSION


@dataclass(frozen=True)
class ContractSource:
    name: str
    path: str
    absolute_path: Path


class NameResolver:
    """Resolve bare contract names to `.sol` files under a contracts directory.

    The directory is walked depth-first with entries in name order and the
    first `<name>.sol` found wins. Paths are reported relative to the
    contracts directory in POSIX form.
    """

    def __init__(self, contracts_dir: Path) -> None:
        self.contracts_dir = contracts_dir

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise GeneratorIOError(f"unable to list {directory}: {exc.strerror or exc}") from exc
        for entry in entries:
            if entry.is_dir():
                yield from self._walk(entry)
            elif entry.is_file() and entry.name.endswith(SOLIDITY_EXTENSION):
                yield entry

    def resolve_if_exists(self, name: str) -> ContractSource | None:
        if not self.contracts_dir.is_dir():
            raise ResolutionError(f"contracts directory not found: {self.contracts_dir}")
        for candidate in self._walk(self.contracts_dir):
            if candidate.name[: -len(SOLIDITY_EXTENSION)] == name:
                return ContractSource(
                    name=name,
                    path=candidate.relative_to(self.contracts_dir).as_posix(),
                    absolute_path=candidate,
                )
        return None

    def resolve(self, name: str) -> ContractSource:
        source = self.resolve_if_exists(name)
        if source is None:
            raise ContractNotFoundError(
                f"unable to resolve contract `{name}` under {self.contracts_dir}",
                contract=name,
            )
        return source

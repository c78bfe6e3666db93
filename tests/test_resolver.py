from __future__ import annotations

from pathlib import Path

import pytest

from contractsgen.errors import ContractNotFoundError, GeneratorIOError, ResolutionError
from contractsgen.exit_codes import ERR_ARTIFACT, ERR_RESOLUTION
from contractsgen.resolver import NameResolver


def _touch(root: Path, rel: str, body: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


def test_resolve_returns_path_relative_to_contracts_dir(tmp_path: Path) -> None:
    _touch(tmp_path, "src/core/Exchange.sol", "contract Exchange {}\n")
    source = NameResolver(tmp_path).resolve("Exchange")
    assert source.name == "Exchange"
    assert source.path == "src/core/Exchange.sol"
    assert source.absolute_path == tmp_path / "src/core/Exchange.sol"


def test_first_match_in_name_order_wins(tmp_path: Path) -> None:
    _touch(tmp_path, "b/Dup.sol")
    _touch(tmp_path, "a/Dup.sol")
    assert NameResolver(tmp_path).resolve("Dup").path == "a/Dup.sol"


def test_non_solidity_files_are_ignored(tmp_path: Path) -> None:
    _touch(tmp_path, "Exchange.txt")
    _touch(tmp_path, "Exchange.sol.bak")
    assert NameResolver(tmp_path).resolve_if_exists("Exchange") is None


def test_unknown_name_raises_not_found(tmp_path: Path) -> None:
    _touch(tmp_path, "src/Exchange.sol")
    with pytest.raises(ContractNotFoundError) as excinfo:
        NameResolver(tmp_path).resolve("Missing")
    assert excinfo.value.contract == "Missing"
    assert excinfo.value.code == ERR_RESOLUTION
    assert excinfo.value.kind == "resolution"
    assert "Missing" in str(excinfo.value)


def test_missing_contracts_dir_is_a_resolution_error(tmp_path: Path) -> None:
    with pytest.raises(ResolutionError, match="contracts directory not found"):
        NameResolver(tmp_path / "nope").resolve("Exchange")


def test_unlistable_directory_is_an_io_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _touch(tmp_path, "locked/Exchange.sol")
    listdir = Path.iterdir

    def _iterdir(self: Path):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied")
        return listdir(self)

    monkeypatch.setattr(Path, "iterdir", _iterdir)
    with pytest.raises(GeneratorIOError, match="unable to list") as excinfo:
        NameResolver(tmp_path).resolve("Exchange")
    assert excinfo.value.code == ERR_ARTIFACT

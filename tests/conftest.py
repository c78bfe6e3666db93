from __future__ import annotations

import socket
from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from tests.helpers import write_json

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "artifacts/contracts-gen/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("contracts-gen", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB), deadline=None)
settings.load_profile("contracts-gen")

SOURCES = {
    "src/Exchange.sol": "contract Exchange {}\n",
    "tokens/ZRXToken.sol": "contract ZRXToken {}\n",
    "tokens/ERC20Token.sol": "contract ERC20Token {}\n",
    "test/TestLibs.sol": "contract TestLibs {}\n",
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)



@pytest.fixture
def sample_package(tmp_path: Path) -> Path:
    pkg = tmp_path / "contracts-exchange"
    for rel, body in SOURCES.items():
        target = pkg / "contracts" / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")
    write_json(
        pkg / "compiler.json",
        {
            "artifactsDir": "generated-artifacts",
            "contracts": ["ZRXToken", "Exchange", "tokens/ERC20Token.sol"],
            "compilerSettings": {"evmVersion": "byzantium"},
        },
    )
    write_json(
        pkg / "tsconfig.json",
        {
            "extends": "../../tsconfig",
            "compilerOptions": {"outDir": "lib", "rootDir": "."},
            "include": ["./src/**/*"],
            "files": [],
        },
    )
    write_json(
        pkg / "package.json",
        {
            "name": "@example/contracts-exchange",
            "version": "1.0.0",
            "config": {"foo": 1, "abis": "generated-artifacts/@(Old).json"},
            "scripts": {"build": "tsc -b"},
        },
    )
    write_json(pkg / ".prettierrc", {"tabWidth": 4, "printWidth": 120, "singleQuote": True})
    return pkg

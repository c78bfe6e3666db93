from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigParseError
from .fs import read_text
from .schema import validate

DEFAULT_CONTRACTS_DIR = "contracts"
DEFAULT_ARTIFACTS_DIR = "artifacts"


def parse_json_record(text: str, source: str) -> dict[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"{source}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise ConfigParseError(f"{source}: expected a JSON object, got {type(payload).__name__}")
    return payload


def load_json_record(path: Path) -> dict[str, Any]:
    return parse_json_record(read_text(path), source=path.name)


@dataclass(frozen=True)
class CompilerConfig:
    contracts: tuple[str, ...]
    contracts_dir: str = DEFAULT_CONTRACTS_DIR
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR

    @classmethod
    def from_record(cls, record: dict[str, Any], source: str = "compiler.json") -> "CompilerConfig":
        validate("compiler-config", record, source)
        return cls(
            contracts=tuple(record["contracts"]),
            contracts_dir=record.get("contractsDir") or DEFAULT_CONTRACTS_DIR,
            artifacts_dir=record.get("artifactsDir") or DEFAULT_ARTIFACTS_DIR,
        )


def load_compiler_config(path: Path) -> CompilerConfig:
    return CompilerConfig.from_record(load_json_record(path), source=path.name)

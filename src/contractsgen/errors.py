from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_ARTIFACT, ERR_CONFIG, ERR_FORMAT, ERR_INTERNAL, ERR_RESOLUTION


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigParseError(ScriptError):
    code: int = ERR_CONFIG
    kind: str = "config_parse"


@dataclass
class ConfigShapeError(ScriptError):
    code: int = ERR_CONFIG
    kind: str = "config_shape"


@dataclass
class ResolutionError(ScriptError):
    code: int = ERR_RESOLUTION
    kind: str = "resolution"


@dataclass
class ContractNotFoundError(ResolutionError):
    contract: str = ""


@dataclass
class FormatError(ScriptError):
    code: int = ERR_FORMAT
    kind: str = "format"


@dataclass
class GeneratorIOError(ScriptError):
    code: int = ERR_ARTIFACT
    kind: str = "io"

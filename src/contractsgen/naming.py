"""Contract name derivation and output file naming."""

from __future__ import annotations

import posixpath
import re

SOLIDITY_EXTENSION = ".sol"

# Snake casing splits runs of capitals letter by letter; these undo it for
# the abbreviations used in contract names. Applied in order, first match only.
ABBREVIATION_FIXES: dict[str, str] = {
    "z_r_x": "zrx",
    "e_r_c": "erc",
}

_HAS_SPACE = re.compile(r"\s")
_HAS_SEPARATOR = re.compile(r"[_\-.:]")
_HAS_CAMEL = re.compile(r"[a-z][A-Z]|[A-Z][a-z]")
_SEPARATOR_SPLITTER = re.compile(r"[\W_]+(.|$)", re.ASCII)
_CAMEL_SPLITTER = re.compile(r"(.)([A-Z]+)")


def is_source_path(reference: str) -> bool:
    return reference.endswith(SOLIDITY_EXTENSION)


def contract_name(reference: str) -> str:
    """`src/tokens/ZRXToken.sol` -> `ZRXToken`; bare names are returned as-is."""
    base = posixpath.basename(reference.replace("\\", "/"))
    if base.endswith(SOLIDITY_EXTENSION) and base != SOLIDITY_EXTENSION:
        return base[: -len(SOLIDITY_EXTENSION)]
    return base


def join_posix(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return posixpath.normpath(joined) if joined else "."


def _unseparate(value: str) -> str:
    return _SEPARATOR_SPLITTER.sub(lambda m: f" {m.group(1)}" if m.group(1) else "", value)


def _uncamelize(value: str) -> str:
    return _CAMEL_SPLITTER.sub(lambda m: f"{m.group(1)} {' '.join(m.group(2).lower())}", value)


def _to_no_case(value: str) -> str:
    if _HAS_SPACE.search(value):
        return value.lower()
    if _HAS_SEPARATOR.search(value):
        return (_unseparate(value) or value).lower()
    if _HAS_CAMEL.search(value):
        return _uncamelize(value).lower()
    return value.lower()


def to_snake_case(value: str) -> str:
    spaced = _unseparate(_to_no_case(value)).strip()
    return _HAS_SPACE.sub("_", spaced)


def make_output_file_name(name: str, fixes: dict[str, str] | None = None) -> str:
    file_name = to_snake_case(name)
    for wrong, right in (ABBREVIATION_FIXES if fixes is None else fixes).items():
        file_name = file_name.replace(wrong, right, 1)
    return file_name

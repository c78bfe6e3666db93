"""Formatting of generated text.

Two formatters share one call shape, `format(text, filepath, options)`:

* `BuiltinFormatter` re-serializes JSON with the configured indent and
  re-indents TypeScript barrels by bracket depth. It is enough for the
  files this tool emits and needs no node toolchain.
* `PrettierFormatter` pipes the text through the package's prettier
  install, which reads its own configuration.

`resolve_format_options` reads the prettier configuration the same way for
both, so builtin output honours `tabWidth` and `useTabs`.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Protocol

import yaml

from .config import parse_json_record
from .context import FormatterName
from .errors import ConfigParseError, ConfigShapeError, FormatError
from .fs import read_text

PRETTIER_CONFIG_FILES = (".prettierrc", ".prettierrc.json", ".prettierrc.yaml", ".prettierrc.yml")
JSON_SUFFIXES = (".json",)
SCRIPT_SUFFIXES = (".ts", ".tsx", ".js", ".jsx")
_OPENERS = "{[("
_CLOSERS = "}])"


@dataclass(frozen=True)
class FormatOptions:
    tab_width: int = 2
    use_tabs: bool = False
    source: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def indent_unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.tab_width

    @classmethod
    def from_mapping(cls, payload: dict[str, Any], source: str | None = None) -> "FormatOptions":
        def _int(key: str, default: int) -> int:
            value = payload.get(key, default)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigShapeError(f"{source or 'prettier config'}: `{key}` must be a non-negative integer")
            return value

        use_tabs = payload.get("useTabs", False)
        if not isinstance(use_tabs, bool):
            raise ConfigShapeError(f"{source or 'prettier config'}: `useTabs` must be a boolean")
        return cls(
            tab_width=_int("tabWidth", 2),
            use_tabs=use_tabs,
            source=source,
            raw=dict(payload),
        )


def _load_prettier_file(path: Path) -> dict[str, Any]:
    text = read_text(path)
    try:
        if path.suffix == ".json":
            payload = json.loads(text)
        elif path.suffix in (".yaml", ".yml"):
            payload = yaml.safe_load(text)
        else:
            # bare .prettierrc may hold JSON (possibly tab-indented) or YAML
            try:
                payload = json.loads(text)
            except json.JSONDecodeError:
                payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigParseError(f"{path.name}: unable to parse prettier config: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigParseError(f"{path.name}: expected a mapping, got {type(payload).__name__}")
    return payload


def _embedded_prettier_config(manifest: Path) -> dict[str, Any] | None:
    try:
        embedded = parse_json_record(read_text(manifest), source=str(manifest)).get("prettier")
    except ConfigParseError:
        # unparseable manifests are skipped, as prettier does
        return None
    return embedded if isinstance(embedded, dict) else None


def find_prettier_config(start: Path) -> tuple[Path, dict[str, Any]] | None:
    """Nearest config wins; within a directory `package.json` comes before `.prettierrc*`."""
    for directory in (start, *start.parents):
        manifest = directory / "package.json"
        if manifest.is_file():
            embedded = _embedded_prettier_config(manifest)
            if embedded is not None:
                return manifest, embedded
        for name in PRETTIER_CONFIG_FILES:
            candidate = directory / name
            if candidate.is_file():
                return candidate, _load_prettier_file(candidate)
    return None


def resolve_format_options(start: Path) -> FormatOptions:
    found = find_prettier_config(start.resolve())
    if found is None:
        return FormatOptions()
    path, payload = found
    return FormatOptions.from_mapping(payload, source=path.as_posix())


class Formatter(Protocol):
    name: str

    def format(self, text: str, filepath: str, options: FormatOptions) -> str: ...


def _bracket_delta(line: str) -> int:
    if line.startswith("//"):
        return 0
    delta = 0
    quote: str | None = None
    escaped = False
    for ch in line:
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in "'\"`":
            quote = ch
        elif ch in _OPENERS:
            delta += 1
        elif ch in _CLOSERS:
            delta -= 1
    return delta


def reindent_script(text: str, indent_unit: str) -> str:
    out: list[str] = []
    depth = 0
    for raw_line in text.strip().splitlines():
        line = raw_line.strip()
        if not line:
            if out and out[-1] != "":
                out.append("")
            continue
        leading = len(line) - len(line.lstrip(_CLOSERS))
        out.append(indent_unit * max(depth - leading, 0) + line)
        depth = max(depth + _bracket_delta(line), 0)
    while out and out[-1] == "":
        out.pop()
    return "\n".join(out) + "\n"


class BuiltinFormatter:
    name = "builtin"

    def format(self, text: str, filepath: str, options: FormatOptions) -> str:
        suffix = PurePosixPath(filepath).suffix
        if suffix in JSON_SUFFIXES:
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as exc:
                raise FormatError(f"{filepath}: generated JSON is invalid: {exc.msg}") from exc
            return json.dumps(payload, indent=options.indent_unit, ensure_ascii=False) + "\n"
        if suffix in SCRIPT_SUFFIXES:
            return reindent_script(text, options.indent_unit)
        raise FormatError(f"{filepath}: no builtin formatter for `{suffix or filepath}` files")


class PrettierFormatter:
    """Run prettier on stdin; prettier resolves its own config from `package_dir`."""

    name = "prettier"

    def __init__(self, package_dir: Path, executable: str | None = None, timeout_seconds: int = 120) -> None:
        self.package_dir = package_dir
        self._executable = executable
        self.timeout_seconds = timeout_seconds

    def executable(self) -> str:
        if self._executable:
            return self._executable
        local = self.package_dir / "node_modules" / ".bin" / "prettier"
        if local.is_file():
            return str(local)
        found = shutil.which("prettier")
        if found:
            return found
        raise FormatError("prettier executable not found; install prettier or use `--formatter builtin`")

    def format(self, text: str, filepath: str, options: FormatOptions) -> str:
        cmd = [self.executable(), "--stdin-filepath", filepath]
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.package_dir,
                input=text,
                text=True,
                capture_output=True,
                check=False,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise FormatError(f"prettier timed out after {self.timeout_seconds}s on {filepath}") from exc
        except OSError as exc:
            raise FormatError(f"unable to run prettier: {exc}") from exc
        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout).strip() or f"exit code {proc.returncode}"
            raise FormatError(f"prettier rejected {filepath}: {detail}")
        return proc.stdout


def build_formatter(name: FormatterName, package_dir: Path) -> Formatter:
    if name == "builtin":
        return BuiltinFormatter()
    if name == "prettier":
        return PrettierFormatter(package_dir)
    raise FormatError(f"unknown formatter: {name}")

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .errors import ScriptError
from .exit_codes import ERR_USAGE

OutputFormat = Literal["text", "json"]
FormatterName = Literal["builtin", "prettier"]


@dataclass(frozen=True)
class PackageLayout:
    """Well-known file names, relative to the package directory."""

    compiler_config: str = "compiler.json"
    tsconfig: str = "tsconfig.json"
    package_manifest: str = "package.json"
    artifacts_module: str = "src/artifacts.ts"
    wrappers_module: str = "src/wrappers.ts"
    wrappers_dir: str = "generated-wrappers"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    package_dir: Path
    layout: PackageLayout = field(default_factory=PackageLayout)
    formatter: FormatterName = "builtin"
    output_format: OutputFormat = "text"
    log_json: bool = False
    quiet: bool = False
    verbose: bool = False
    check: bool = False

    def path(self, relative: str) -> Path:
        return self.package_dir / relative

    @classmethod
    def from_args(
        cls,
        cwd: str | None,
        run_id: str | None,
        formatter: FormatterName = "builtin",
        output_format: OutputFormat = "text",
        log_json: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        check: bool = False,
        layout: PackageLayout | None = None,
    ) -> "RunContext":
        package_dir = Path(cwd).resolve() if cwd else Path.cwd().resolve()
        if not package_dir.is_dir():
            raise ScriptError(f"package directory does not exist: {package_dir}", ERR_USAGE, kind="usage")
        default_run = f"contracts-gen-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or os.environ.get("RUN_ID", default_run),
            package_dir=package_dir,
            layout=layout or PackageLayout(),
            formatter=formatter,
            output_format=output_format,
            log_json=log_json,
            quiet=quiet,
            verbose=verbose,
            check=check,
        )

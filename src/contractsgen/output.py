"""CLI payload output helpers."""

from __future__ import annotations

import json
from typing import Any

from .context import RunContext
from .pipeline import GenerationReport


def dumps_json(payload: Any) -> str:
    return json.dumps(payload, sort_keys=True)


def emit(payload: dict[str, object]) -> None:
    print(dumps_json(payload))


def build_report_payload(ctx: RunContext, report: GenerationReport) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "contracts-gen",
        "status": "ok" if report.ok else "drift",
        "run_id": ctx.run_id,
        "mode": report.mode,
        "package_dir": str(ctx.package_dir),
        "contracts": list(report.contracts),
        "files": [
            {"generator": f.generator_id, "path": f.relative_path, "changed": f.changed}
            for f in report.files
        ],
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str) -> str:
    if as_json:
        return dumps_json(
            {
                "schema_version": 1,
                "tool": "contracts-gen",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return message

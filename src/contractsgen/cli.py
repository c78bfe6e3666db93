from __future__ import annotations

import argparse
import sys

from . import __version__
from .context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_DRIFT, ERR_INTERNAL, OK
from .logging import log_event
from .output import build_report_payload, emit, render_error
from .pipeline import run_generation


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="contracts-gen",
        description="Regenerate contract lists, artifact/wrapper barrels and manifest config from compiler.json.",
    )
    p.add_argument("--version", action="version", version=f"contracts-gen {__version__}")
    p.add_argument("--cwd", help="package directory holding compiler.json (default: current directory)")
    p.add_argument("--run-id", help="run identifier used in log events")
    p.add_argument("--formatter", choices=["builtin", "prettier"], default="builtin", help="formatter for generated files")
    p.add_argument("--check", action="store_true", help="report stale generated files without writing")
    p.add_argument("--json", action="store_true", help="emit JSON report on stdout")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="log per-contract resolution and rendering")
    vg.add_argument("--quiet", action="store_true", help="only log warnings and errors")
    return p


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    try:
        ctx = RunContext.from_args(
            ns.cwd,
            ns.run_id,
            formatter=ns.formatter,
            output_format="json" if ns.json else "text",
            log_json=ns.log_json,
            quiet=ns.quiet,
            verbose=ns.verbose,
            check=ns.check,
        )
    except ScriptError as exc:
        print(render_error(as_json=ns.json, message=exc.message, code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    log_event(ctx, "info", "cli", "start", package_dir=str(ctx.package_dir), mode="check" if ctx.check else "write")
    try:
        report = run_generation(ctx)
    except ScriptError as exc:
        log_event(ctx, "error", "cli", "failed", kind=exc.kind, code=exc.code, message=exc.message)
        if ns.json:
            print(render_error(as_json=True, message=exc.message, code=exc.code, kind=exc.kind))
        return exc.code
    except Exception as exc:  # pragma: no cover
        log_event(ctx, "error", "cli", "internal-error", error=type(exc).__name__, message=str(exc))
        if ns.json:
            print(render_error(as_json=True, message=str(exc), code=ERR_INTERNAL, kind="internal"))
        return ERR_INTERNAL
    if ns.json:
        emit(build_report_payload(ctx, report))
    if not report.ok:
        log_event(ctx, "error", "cli", "drift", stale=",".join(f.relative_path for f in report.stale))
        return ERR_DRIFT
    log_event(ctx, "info", "cli", "done", files=len(report.files), changed=len(report.stale))
    return OK


if __name__ == "__main__":
    raise SystemExit(main())

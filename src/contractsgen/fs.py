from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import ConfigParseError, GeneratorIOError


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{path.name}: not valid UTF-8 at byte {exc.start}") from exc
    except OSError as exc:
        raise GeneratorIOError(f"unable to read {path}: {exc.strerror or exc}") from exc


def read_text_if_exists(path: Path) -> str | None:
    if not path.is_file():
        return None
    return read_text(path)


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        existing_mode = path.stat().st_mode & 0o777 if path.is_file() else None
        with tempfile.NamedTemporaryFile(
            "w", encoding=encoding, newline="", delete=False, dir=path.parent, prefix=f".{path.name}."
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        if existing_mode is not None:
            os.chmod(tmp_path, existing_mode)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise GeneratorIOError(f"unable to write {path}: {exc.strerror or exc}") from exc
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()

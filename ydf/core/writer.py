"""JSON output writing."""

from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel


def to_jsonable(result: BaseModel | Sequence[BaseModel]) -> Any:
    """Dump a model, or a list of models, to JSON-compatible data."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    return [item.model_dump(mode="json") for item in result]


def write_result(result: BaseModel | Sequence[BaseModel], dest: Path | None = None) -> Path | None:
    """Write a result as indented JSON to ``dest``, or to stdout if None.

    Returns the written file path, if any.
    """
    data = to_jsonable(result)
    if dest is None:
        json.dump(data, sys.stdout, indent=2, default=str, ensure_ascii=False)
        sys.stdout.write("\n")
        return None
    dest = Path(dest)
    _atomic_write_json(dest, data)
    return dest


def _atomic_write_json(dest: Path, data: Any) -> None:
    """Write JSON atomically: write to temp file, then rename."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=dest.parent, suffix=".tmp", prefix=".ydf_"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, dest)
    except BaseException:
        os.unlink(tmp_path)
        raise

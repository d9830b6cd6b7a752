# files.py
from __future__ import annotations
from pathlib import Path
from typing import Union

from ocr_similarity.errors import InputError

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """
    utf-8-sig handles a BOM if present. Content is returned as-is; an empty file is not an error here.
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read text file {path}: {e}") from e


def read_bytes(path: PathLike) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputError(f"Cannot read image file {path}: {e}") from e


def write_text(path: PathLike, content: str) -> None:
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot write result file {path}: {e}") from e

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def list_files(src: Path, *, suffix: str, ignore_case: bool = False) -> List[Path]:
    """Immediate, non-hidden regular files of ``src`` with the given suffix."""

    want = suffix.lower() if ignore_case else suffix
    out: List[Path] = []
    for item in sorted(src.iterdir(), key=lambda c: c.name):
        if item.name.startswith(".") or not item.is_file():
            continue
        got = item.suffix.lower() if ignore_case else item.suffix
        if got == want:
            out.append(item)
    return out


def replace_file(src: Path, dst: Path) -> None:
    """Copy ``src`` to ``dst``, removing any existing ``dst`` first."""

    if dst.exists() or dst.is_symlink():
        logger.debug("Removing existing %s", str(dst))
        dst.unlink()
    shutil.copy2(src, dst)


def copy_files(files: Iterable[Path], dst_dir: Path) -> List[Path]:
    copied: List[Path] = []
    for f in files:
        out = dst_dir / f.name
        replace_file(f, out)
        copied.append(out)
    return copied

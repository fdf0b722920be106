from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import List

import requests

from ..errors import (
    FontDownloadError,
    FontExtractionError,
    MissingFontFilesError,
    UnzipToolUnavailableError,
)
from ..settings import Settings
from .assets import copy_files, list_files
from .command import run_cmd
from .net import fetch_bytes

logger = logging.getLogger(__name__)

FONT_SUFFIX = ".ttf"
PAYLOAD_DIR = "ttf"


def find_ttf_directory(extracted: Path) -> Path:
    """Locate the folder holding the .ttf payload inside an extracted archive.

    Release archives either ship ``ttf/`` at the top level or nest it one
    level down under a versioned folder. Nested candidates are taken in name
    order.
    """

    direct = extracted / PAYLOAD_DIR
    if direct.exists():
        return direct

    candidates = [
        folder / PAYLOAD_DIR
        for folder in sorted(extracted.iterdir(), key=lambda c: c.name)
        if folder.is_dir() and not folder.name.startswith(".") and (folder / PAYLOAD_DIR).exists()
    ]
    if not candidates:
        raise MissingFontFilesError(extracted)

    if len(candidates) > 1:
        logger.warning("Multiple font folders found, using %s", str(candidates[0]))
    return candidates[0]


def collect_font_files(ttf_dir: Path) -> List[Path]:
    fonts = list_files(ttf_dir, suffix=FONT_SUFFIX, ignore_case=True)
    if not fonts:
        raise MissingFontFilesError(ttf_dir)
    return fonts


def _download_archive(url: str) -> bytes:
    try:
        return fetch_bytes(url)
    except requests.RequestException as e:
        logger.debug("Font download failed: %s", e)
        raise FontDownloadError(url) from e


def _extract(settings: Settings, archive: Path, out_dir: Path) -> None:
    try:
        r = run_cmd([settings.unzip_path, "-o", str(archive), "-d", str(out_dir)])
    except OSError as e:
        raise UnzipToolUnavailableError(settings.unzip_path) from e

    if r.returncode != 0:
        raise FontExtractionError(r.returncode)


def ensure_font_installed(settings: Settings, *, dry_run: bool = False) -> bool:
    """Make sure Fira Code is present in the fonts directory.

    Returns True when fonts were downloaded and installed, False when the
    reference font was already there or this is a dry run.
    """

    fonts_dir = settings.fonts_path
    if settings.reference_font_path.exists():
        logger.info("Reference font %s present; skipping download", str(settings.reference_font_path))
        return False

    if dry_run:
        print(f"Would ensure Fira Code fonts are installed at {fonts_dir}")
        return False

    print("Downloading Fira Code font...")
    fonts_dir.mkdir(parents=True, exist_ok=True)

    url = settings.font_archive_url
    archive_bytes = _download_archive(url)

    with tempfile.TemporaryDirectory(prefix="hexxa-fonts-") as tmp:
        staging = Path(tmp)
        archive = staging / "FiraCode.zip"
        archive.write_bytes(archive_bytes)

        extracted = staging / "Extracted"
        extracted.mkdir(parents=True, exist_ok=True)
        _extract(settings, archive, extracted)

        ttf_dir = find_ttf_directory(extracted)
        fonts = collect_font_files(ttf_dir)
        installed = copy_files(fonts, fonts_dir)
        logger.info("Copied %d font files into %s", len(installed), str(fonts_dir))

    print(f"Installed Fira Code fonts in {fonts_dir}")
    return True

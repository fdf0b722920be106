from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..errors import MissingResourceBundleError, MissingThemesDirectoryError
from ..options import Options
from ..settings import Settings
from .assets import list_files, replace_file

logger = logging.getLogger(__name__)

THEME_SUFFIX = ".xccolortheme"
THEMES_DIR = "Themes"


def locate_themes_directory(settings: Settings) -> Path:
    resources = settings.resources_path
    if not resources.is_dir():
        raise MissingResourceBundleError()

    themes = resources / THEMES_DIR
    if not themes.exists():
        raise MissingThemesDirectoryError(themes)
    return themes


def install_themes(source_dir: Path, options: Options) -> List[Path]:
    """Copy every bundled theme into the destination.

    Returns the destination paths, planned ones in dry-run mode.
    """

    if not options.dry_run:
        options.destination.mkdir(parents=True, exist_ok=True)

    themes = list_files(source_dir, suffix=THEME_SUFFIX)
    if not themes:
        print(f"No themes found to install at {source_dir}")
        return []

    out: List[Path] = []
    for theme in themes:
        dst = options.destination / theme.name
        out.append(dst)
        if options.dry_run:
            print(f"Would copy {theme.name} to {dst}")
            continue

        replace_file(theme, dst)
        logger.info("Copied %s -> %s", str(theme), str(dst))
        print(f"Installed {theme.name}")
    return out

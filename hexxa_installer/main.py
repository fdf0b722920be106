from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .errors import InstallerError
from .logging_utils import configure_logging
from .options import Options, parse_options, print_usage
from .pipeline import InstallCtx, PipelineResult, run_pipeline
from .settings import Settings, load_settings
from .steps import EnsureFontStep, InstallThemesStep, LocateThemesStep

logger = logging.getLogger(__name__)


def build_steps():
    return [
        EnsureFontStep(),
        LocateThemesStep(),
        InstallThemesStep(),
    ]


def run(options: Options, settings: Optional[Settings] = None) -> PipelineResult:
    """Provision the font, then install the bundled themes."""

    ctx = InstallCtx(options=options, settings=settings or Settings())
    result = run_pipeline(ctx=ctx, steps=build_steps())

    if options.dry_run:
        print("Dry run completed. No files were written.")
    else:
        print(f"All themes installed to {options.destination}")
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        options = parse_options(argv)
        settings = load_settings()
        configure_logging(log_path=settings.log_path, level=settings.level)
        run(options, settings)
        return 0
    except (InstallerError, OSError) as e:
        logger.debug("Installer failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        print_usage()
        return 1

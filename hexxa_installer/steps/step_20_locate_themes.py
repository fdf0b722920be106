from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.themes import locate_themes_directory
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class LocateThemesStep:
    step_id = "20_locate_themes"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        themes_dir = locate_themes_directory(ctx.settings)
        logger.info("Bundled themes at %s", str(themes_dir))
        state["themes_dir"] = themes_dir
        return state

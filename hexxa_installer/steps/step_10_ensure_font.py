from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.fonts import ensure_font_installed
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class EnsureFontStep:
    step_id = "10_ensure_font"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        state["fonts_installed"] = ensure_font_installed(ctx.settings, dry_run=ctx.dry_run)
        return state

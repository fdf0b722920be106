from __future__ import annotations

from typing import Any, Dict

from ..lib.themes import install_themes
from ..pipeline import InstallCtx


class InstallThemesStep:
    step_id = "30_install_themes"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        state["installed_themes"] = install_themes(state["themes_dir"], ctx.options)
        return state

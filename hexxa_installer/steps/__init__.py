from .step_10_ensure_font import EnsureFontStep
from .step_20_locate_themes import LocateThemesStep
from .step_30_install_themes import InstallThemesStep

__all__ = [
    "EnsureFontStep",
    "LocateThemesStep",
    "InstallThemesStep",
]

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)


CONFIG_ENV_VAR = "HEXXA_XCODE_THEME_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/hexxa-xcode-theme/config.yaml"

FONT_ARCHIVE_URL = "https://github.com/tonsky/FiraCode/releases/download/6.2/Fira_Code_v6.2.zip"

# Environment variables win over the config file.
ENV_OVERRIDES = {
    "HEXXA_FONTS_DIR": "fonts_dir",
    "HEXXA_FONT_ARCHIVE_URL": "font_archive_url",
    "HEXXA_UNZIP_PATH": "unzip_path",
    "HEXXA_LOG_PATH": "log_path",
    "HEXXA_LOG_LEVEL": "log_level",
}


def _bundled_resources_dir() -> str:
    # hexxa_installer/settings.py -> hexxa_installer/resources
    return str(Path(__file__).resolve().parent / "resources")


@dataclass(frozen=True)
class Settings:
    fonts_dir: str = "~/Library/Fonts"
    reference_font: str = "FiraCode-Regular.ttf"
    font_archive_url: str = FONT_ARCHIVE_URL
    unzip_path: str = "/usr/bin/unzip"
    resources_dir: str = _bundled_resources_dir()
    log_path: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def fonts_path(self) -> Path:
        return Path(self.fonts_dir).expanduser()

    @property
    def reference_font_path(self) -> Path:
        return self.fonts_path / self.reference_font

    @property
    def resources_path(self) -> Path:
        return Path(self.resources_dir).expanduser()

    @property
    def level(self) -> int:
        value = logging.getLevelName(self.log_level.upper())
        if not isinstance(value, int):
            raise ConfigError(f"unknown log level {self.log_level!r}")
        return value


def _read_yaml(p: Path) -> Dict[str, Any]:
    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"{p} must be a YAML file")

    import yaml

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{p} is not valid YAML ({e})") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")
    return raw


def _config_path(path: Optional[str], environ: Mapping[str, str]) -> Optional[Path]:
    if path:
        return Path(path).expanduser()

    override = (environ.get(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser()

    default = Path(DEFAULT_CONFIG_PATH).expanduser()
    return default if default.exists() else None


def load_settings(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from defaults, an optional YAML file and the environment.

    An explicitly requested config file (argument or HEXXA_XCODE_THEME_CONFIG)
    must exist; the per-user default is only read when present.
    """

    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(Settings)}
    values: Dict[str, Any] = {}

    p = _config_path(path, environ)
    if p is not None:
        if not p.exists():
            raise ConfigError(f"config file {p} does not exist")
        raw = _read_yaml(p)
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigError(f"unknown keys in {p}: {', '.join(unknown)}")
        values.update({k: str(v) for k, v in raw.items() if v is not None})
        logger.debug("Loaded settings from %s", p)

    for env_name, key in ENV_OVERRIDES.items():
        value = (environ.get(env_name) or "").strip()
        if value:
            values[key] = value

    settings = replace(Settings(), **values)
    # Validate eagerly so a bad level fails before any work starts.
    _ = settings.level
    return settings

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from hexxa_installer.lib.command import CmdResult  # noqa: E402
from hexxa_installer.settings import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a scratch dir and drop any HEXXA_* overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in [
        "HEXXA_XCODE_THEME_CONFIG",
        "HEXXA_FONTS_DIR",
        "HEXXA_FONT_ARCHIVE_URL",
        "HEXXA_UNZIP_PATH",
        "HEXXA_LOG_PATH",
        "HEXXA_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield home

    pkg = logging.getLogger("hexxa_installer")
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True


@pytest.fixture
def scratch_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect tempfile so staging directories can be inspected."""
    import tempfile

    d = tmp_path / "scratch"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    resources = tmp_path / "resources"
    (resources / "Themes").mkdir(parents=True)
    return Settings(
        fonts_dir=str(tmp_path / "Fonts"),
        resources_dir=str(resources),
        unzip_path="/usr/bin/unzip",
    )


def make_unzip(layout: Iterable[str], calls: List[List[str]] | None = None, returncode: int = 0) -> Callable:
    """Build a run_cmd stand-in that materialises ``layout`` under the -d dir."""

    def fake_run_cmd(argv):
        argv = list(argv)
        if calls is not None:
            calls.append(argv)
        out = Path(argv[argv.index("-d") + 1])
        for rel in layout:
            p = out / rel
            if rel.endswith("/"):
                p.mkdir(parents=True, exist_ok=True)
            else:
                p.parent.mkdir(parents=True, exist_ok=True)
                p.write_bytes(b"font:" + rel.encode("utf-8"))
        return CmdResult(argv=argv, returncode=returncode, stdout="", stderr="")

    return fake_run_cmd


@pytest.fixture
def fake_unzip() -> Callable:
    return make_unzip

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class InstallerError(RuntimeError):
    """Base for every failure that aborts an installer run."""


class MissingResourceBundleError(InstallerError):
    def __init__(self) -> None:
        super().__init__("Unable to locate bundled themes.")


class MissingThemesDirectoryError(InstallerError):
    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(f"Themes directory not found at {self.path}.")


class InvalidArgumentError(InstallerError):
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument: {argument}.")


class FontDownloadError(InstallerError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Failed to download font archive from {url}.")


class FontExtractionError(InstallerError):
    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(f"Unzip process failed with exit code {returncode}.")


class MissingFontFilesError(InstallerError):
    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(f"Unable to locate Fira Code .ttf files in extracted archive at {self.path}.")


class UnzipToolUnavailableError(InstallerError):
    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Unable to run {executable}. Ensure the unzip tool is available.")


class ConfigError(InstallerError):
    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"Invalid configuration: {message}.")

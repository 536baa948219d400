"""
Configuration loading and project resolution.

Reads floki.toml and decides, for each project slot, which directory the
build tool should run in:

- an explicit override from [floki] is used as-is, without checking it exists;
- otherwise the slot's default directory ("app" / "client") if it exists;
- otherwise the slot is inactive.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..core.exceptions import ConfigFileError, ConfigParseError, describe_os_error
from ..core.models.config import FlokiConfig
from ..core.models.projects import Projects, ProjectSlot

if TYPE_CHECKING:
    from ..core.interfaces.filesystem import IFileSystem
    from ..core.interfaces.logger import ILogger

DEFAULT_CONFIG_FILE = "floki.toml"

# Default floki.toml written by `floki init`
DEFAULT_CONFIG_TEMPLATE = """\
# floki configuration file

[floki]
# Directory of the main (app) project. Defaults to ./app when it exists.
# main_service = "app"
# Directory of the client project. Defaults to ./client when it exists.
# client_service = "client"
"""


class ConfigResolver:
    """
    Loads floki.toml and derives the active Projects.

    Usage:
        resolver = ConfigResolver(filesystem, logger)
        projects = resolver.resolve(resolver.load())
    """

    def __init__(
        self,
        filesystem: IFileSystem | None = None,
        logger: ILogger | None = None,
        cwd: Path | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            filesystem: Directory existence queries (local filesystem if omitted)
            logger: Logger for diagnostics
            cwd: Directory relative config paths are read from
        """
        if filesystem is None:
            from .filesystem import LocalFileSystem

            filesystem = LocalFileSystem(root=cwd)
        if logger is None:
            from .logging import NullLogger

            logger = NullLogger()
        self._fs = filesystem
        self._logger = logger
        self._cwd = cwd

    def _locate(self, path: str | Path) -> Path:
        path = Path(path)
        if self._cwd is not None and not path.is_absolute():
            return self._cwd / path
        return path

    def load(self, path: str | Path | None = None) -> FlokiConfig:
        """
        Read and validate a configuration file.

        Args:
            path: Config file path (defaults to floki.toml)

        Returns:
            Validated FlokiConfig

        Raises:
            ConfigFileError: If the file cannot be read
            ConfigParseError: If the content is not valid floki configuration
        """
        display = str(path) if path is not None else DEFAULT_CONFIG_FILE
        config_path = self._locate(display)
        self._logger.debug("Reading config file %s", config_path)

        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(describe_os_error(e), file_path=display, cause=e) from e

        self._logger.trace("Config file content:\n%s", text)

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(str(e), file_path=display, cause=e) from e

        try:
            return FlokiConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(_summarize(e), file_path=display, cause=e) from e

    def load_or_default(self, path: str | Path | None = None) -> FlokiConfig:
        """
        Like load(), but a missing default floki.toml means "no overrides".

        An explicitly requested path must exist.
        """
        if path is None and not self._locate(DEFAULT_CONFIG_FILE).exists():
            self._logger.info("No %s found, using directory defaults", DEFAULT_CONFIG_FILE)
            return FlokiConfig.empty()
        return self.load(path)

    def resolve(self, config: FlokiConfig) -> Projects:
        """Derive the active project directories. Never fails."""
        projects = Projects(
            app=self._param_or_folder(config.floki.main_service, ProjectSlot.APP),
            client=self._param_or_folder(config.floki.client_service, ProjectSlot.CLIENT),
        )
        self._logger.debug("Resolved projects: app=%s, client=%s", projects.app, projects.client)
        return projects

    def _param_or_folder(self, param: str | None, slot: ProjectSlot) -> str | None:
        if param is not None:
            return param
        folder = slot.default_directory
        if self._fs.directory_exists(folder):
            return folder
        return None

    def save_default_file(self, directory: str | Path | None = None) -> Path:
        """
        Write the default floki.toml, overwriting any existing file.

        Args:
            directory: Target directory (defaults to the working directory)

        Returns:
            Path of the written file

        Raises:
            ConfigFileError: If the file cannot be written
        """
        base = Path(directory) if directory is not None else (self._cwd or Path())
        target = base / DEFAULT_CONFIG_FILE
        self._logger.debug("Adding default %s file", target)
        self._logger.trace("Content of %s:\n%s", DEFAULT_CONFIG_FILE, DEFAULT_CONFIG_TEMPLATE)

        try:
            target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(
                describe_os_error(e),
                operation="write default config",
                file_path=str(target),
                cause=e,
            ) from e
        return target


def _summarize(error: ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)

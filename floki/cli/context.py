"""
Click context extension for floki CLI.

Provides FlokiContext dataclass that holds the global options and gives
commands access to the bootstrapped services via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.presenter import IPresenter
    from ..services.config_resolver import ConfigResolver
    from ..services.dispatch.dispatcher import CommandDispatcher


@dataclass
class FlokiContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Working directory projects are resolved against
        release: Forward --release to the build tool
        verbose: -v count
        config_path: Explicit config file, or None for ./floki.toml
    """

    cwd: Path
    release: bool = False
    verbose: int = 0
    config_path: Path | None = None

    @classmethod
    def create(
        cls,
        release: bool = False,
        verbose: int = 0,
        config_path: Path | None = None,
        cwd: Path | None = None,
    ) -> FlokiContext:
        """Create a FlokiContext for the current environment."""
        return cls(
            cwd=cwd if cwd is not None else Path.cwd(),
            release=release,
            verbose=verbose,
            config_path=config_path,
        )

    def bootstrap(self) -> None:
        """Register services for this invocation in the DI container."""
        from ..core.bootstrap import bootstrap

        bootstrap(verbose=self.verbose, cwd=self.cwd)

    @property
    def logger(self) -> ILogger:
        from ..core.di import resolve_or_default
        from ..core.interfaces.logger import ILogger
        from ..services.logging import NullLogger

        return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    @property
    def presenter(self) -> IPresenter:
        from ..core.di import resolve_or_default
        from ..core.interfaces.presenter import IPresenter
        from ..presenters.console import ConsolePresenter

        return resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]

    def resolver(self) -> ConfigResolver:
        """Build a ConfigResolver wired to the registered filesystem and logger."""
        from ..core.di import resolve_or_default
        from ..core.interfaces.filesystem import IFileSystem
        from ..services.config_resolver import ConfigResolver
        from ..services.filesystem import LocalFileSystem

        filesystem = resolve_or_default(IFileSystem, lambda: LocalFileSystem(root=self.cwd))  # type: ignore[type-abstract]
        return ConfigResolver(filesystem=filesystem, logger=self.logger, cwd=self.cwd)

    def dispatcher(self) -> CommandDispatcher:
        """Build a CommandDispatcher wired to the registered runner."""
        from ..core.di import resolve_or_default
        from ..core.interfaces.runner import IToolRunner
        from ..services.dispatch.dispatcher import CommandDispatcher
        from ..services.execution.runner import CargoRunner

        runner = resolve_or_default(IToolRunner, lambda: CargoRunner(base_dir=self.cwd))  # type: ignore[type-abstract]
        return CommandDispatcher(runner, logger=self.logger, presenter=self.presenter)

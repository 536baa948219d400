"""
Application bootstrap for floki.

Initializes the DI container with the logger, presenter, filesystem and
build tool runner. Called once by the CLI before any command runs.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.filesystem import IFileSystem
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .interfaces.runner import IToolRunner
from .settings import FlokiSettings, load_settings

_initialized = False


def bootstrap(
    verbose: int = 0,
    cwd: Path | None = None,
    settings: FlokiSettings | None = None,
) -> ServiceContainer:
    """
    Bootstrap the floki application.

    Args:
        verbose: Verbosity counter from the command line (0-3+)
        cwd: Working directory projects are resolved against
        settings: Runtime settings (loaded from the environment if omitted)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, verbose, cwd, settings or load_settings())

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer,
    verbose: int,
    cwd: Path | None,
    settings: FlokiSettings,
) -> None:
    """Register core application services.

    Services already registered (e.g. fakes installed by tests) are kept.
    """
    from ..presenters.console import ConsolePresenter
    from ..services.execution.runner import CargoRunner
    from ..services.filesystem import LocalFileSystem
    from ..services.logging import FlokiLogger, verbosity_to_level

    level = verbosity_to_level(verbose)
    if not container.is_registered(ILogger):
        logger = FlokiLogger(level=level)
        container.register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]
    logger = container.resolve(ILogger)  # type: ignore[type-abstract]
    logger.info("Log level set to: %s", level)

    if not container.is_registered(IPresenter):
        container.register_singleton(
            IPresenter,  # type: ignore[type-abstract]
            implementation=ConsolePresenter(use_color=settings.color),
        )
    if not container.is_registered(IFileSystem):
        container.register_singleton(
            IFileSystem,  # type: ignore[type-abstract]
            factory=lambda: LocalFileSystem(root=cwd),
        )
    if not container.is_registered(IToolRunner):
        container.register_singleton(
            IToolRunner,  # type: ignore[type-abstract]
            factory=lambda: CargoRunner(executable=settings.cargo, base_dir=cwd, logger=logger),
        )


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


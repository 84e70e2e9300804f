"""
Application bootstrap for branchscout.

Initializes the DI container with the logger, the git interactors and
the services built on them. Called once by the CLI at startup.
"""

from __future__ import annotations

from .container import ServiceContainer, get_container
from .interfaces.git import IBranchInteractor, ICommitInteractor, IRemoteInteractor
from .interfaces.logger import ILogger
from .settings import BranchscoutSettings, load_settings

_initialized = False


def bootstrap(
    settings: BranchscoutSettings | None = None,
    *,
    verbose: bool = False,
) -> ServiceContainer:
    """
    Bootstrap the branchscout application.

    Args:
        settings: Loaded settings (default: load from config file/env)
        verbose: Force debug-level console logging

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings()

    container.register_singleton(BranchscoutSettings, implementation=settings)
    _register_logger(container, settings, verbose)
    _register_git_services(container, settings)

    _initialized = True
    return container


def _register_logger(
    container: ServiceContainer, settings: BranchscoutSettings, verbose: bool
) -> None:
    from ..services.logging import BranchscoutLogger

    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: BranchscoutLogger.from_config(settings.logging, verbose),
    )


def _register_git_services(container: ServiceContainer, settings: BranchscoutSettings) -> None:
    """Register the git interactors and the domain services on top of them."""
    from ..plugins.vcs import GitBranchInteractor, GitCommitInteractor, GitRemoteInteractor
    from ..services.vcs import BranchService, CommitService, RemoteService

    timeout = settings.git.timeout

    container.register_singleton(
        IBranchInteractor,  # type: ignore[type-abstract]
        factory=lambda: GitBranchInteractor(timeout=timeout),
    )
    container.register_singleton(
        ICommitInteractor,  # type: ignore[type-abstract]
        factory=lambda: GitCommitInteractor(timeout=timeout),
    )
    container.register_singleton(
        IRemoteInteractor,  # type: ignore[type-abstract]
        factory=lambda: GitRemoteInteractor(timeout=timeout),
    )

    container.register_singleton(
        CommitService,
        factory=lambda: CommitService(container.resolve(ICommitInteractor)),  # type: ignore[type-abstract]
    )
    container.register_singleton(
        BranchService,
        factory=lambda: BranchService(
            container.resolve(IBranchInteractor),  # type: ignore[type-abstract]
            container.resolve(CommitService),
        ),
    )
    container.register_singleton(
        RemoteService,
        factory=lambda: RemoteService(container.resolve(IRemoteInteractor)),  # type: ignore[type-abstract]
    )


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version

import typer

from ..errors import TzconvError
from ..global_config import LOG_FORMAT, PACKAGE_NAME

_LOGGING_CONFIGURED = False


def get_tzconv_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure CLI-wide logging once.

    Sets up basic logging configuration for the CLI. Safe to call multiple
    times; only configures on first call.

    Args:
        level: Logging level (defaults to INFO).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses module name if None.

    Returns:
        Configured Logger instance.
    """
    return logging.getLogger(name)


def fail(message: str) -> typer.Exit:
    """Print a red error line to stderr and return the exit to raise.

    Args:
        message: Text shown to the user.

    Returns:
        typer.Exit with code 1, for the caller to raise.

    User Output:
        - Prints "✗ {message}" via typer.secho() in red on stderr.
    """
    typer.secho(f"✗ {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(1)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that turns project errors into a one-line message and
    unexpected errors into a logged traceback, exiting with code 1 in both
    cases. Re-raises typer.Exit to allow normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    Logs:
        - DEBUG: "{operation} failed" with traceback for project errors.
        - ERROR: "Error during {operation}" with traceback for anything else.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except TzconvError as exc:
        logger.debug("%s failed", operation, exc_info=True)
        raise fail(str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        raise fail(f"{operation} failed: {exc}") from exc

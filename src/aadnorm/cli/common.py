from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import typer
from rich.console import Console

from ..errors import AadNormError, ConfigError

console = Console()

LOG_LEVEL_ENV = "AADNORM_LOG_LEVEL"
DEBUG_ENV = "AADNORM_DEBUG"
LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(level_name: str | None = None) -> int:
    """Attach a stream handler to the ``aadnorm`` logger and return its level.

    The level comes from ``level_name`` or ``AADNORM_LOG_LEVEL`` and falls back
    to ``WARNING`` for unknown names.
    """

    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("aadnorm")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return level


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except ConfigError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            console.print("Fix or remove the config file, or run `aadnorm config clear`.")
            raise typer.Exit(1) from None
        except AadNormError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv(DEBUG_ENV):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print(f"Set {DEBUG_ENV}=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def emit_values(values: list[str], *, as_json: bool = False) -> None:
    """Write one value per line, or the whole list as JSON."""

    if as_json:
        typer.echo(json.dumps(values))
        return
    for value in values:
        typer.echo(value)


def emit_mapping(data: dict[str, Any]) -> None:
    typer.echo(json.dumps(data, indent=2))


__all__ = [
    "console",
    "configure_logging",
    "handle_cli_errors",
    "emit_values",
    "emit_mapping",
]

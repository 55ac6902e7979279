"""Command decorator: confirmation, error reporting and exit codes."""

from functools import wraps
from typing import Callable

import click

from rosa_ops.utils.exceptions import CLIError, EmptyResultWarning
from rosa_ops.utils.logger import setup_logger


def report_error(message: str) -> None:
    click.echo(f"ERR: {message}", err=True)


def report_warning(message: str) -> None:
    click.echo(f"WARN: {message}", err=True)


def handle_operation_error(operation_name: str, error: CLIError) -> None:
    """Report a CLIError to the user and the error log."""
    logger = setup_logger("rosa_ops.errors", "errors.log")

    if isinstance(error, EmptyResultWarning):
        report_warning(str(error))
        logger.warning(f"{operation_name}: {error}")
        return

    report_error(str(error))
    logger.error(
        f"Error in {operation_name}: {error}",
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def command_operation(requires_confirmation: bool = False):
    """Wrap a click command so CLIErrors end the command with exit status 1.

    The wrapped function receives the click context first. ``--yes``
    (``assume_yes``) skips the confirmation prompt.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(ctx: click.Context, *args, **kwargs):
            operation_name = ctx.command_path or func.__name__

            if requires_confirmation and not kwargs.get("assume_yes", False):
                if not click.confirm(f"Continue with {operation_name}?"):
                    click.echo("Operation cancelled by user.")
                    return None

            try:
                return func(ctx, *args, **kwargs)
            except CLIError as e:
                handle_operation_error(operation_name, e)
                ctx.exit(1)

        return wrapper

    return decorator

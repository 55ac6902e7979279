#!/usr/bin/env python3
"""
utils/interactive.py

Blocking interactive prompts built on click.
"""

from typing import Callable, List, Optional, Sequence

import click

from rosa_ops.core.constants import MULTI_AZ_ZONE_COUNT
from rosa_ops.utils.exceptions import ConfigurationError

Validator = Callable[[List[str]], None]


def get_option(
    question: str,
    options: Sequence[str],
    default: Optional[str] = None,
    help_text: str = "",
    required: bool = True,
) -> str:
    """Ask for one value out of ``options``."""
    if not options:
        raise ConfigurationError(f"No options available for '{question}'")
    if help_text:
        click.echo(f"? {help_text}", err=True)
    if default not in options:
        default = None
    answer = click.prompt(
        question,
        type=click.Choice(list(options)),
        default=default,
        show_choices=True,
    )
    if required and not answer:
        raise ConfigurationError(f"A value is required for '{question}'")
    return answer


def get_bool(question: str, default: bool = False, help_text: str = "") -> bool:
    """Ask a yes/no question."""
    if help_text:
        click.echo(f"? {help_text}", err=True)
    return click.confirm(question, default=default)


def get_multiple_options(
    question: str,
    options: Sequence[str],
    help_text: str = "",
    validators: Sequence[Validator] = (),
) -> List[str]:
    """Ask for a comma-separated selection out of ``options``.

    Unknown entries and validator failures are reported and the question is
    asked again.
    """
    if not options:
        raise ConfigurationError(f"No options available for '{question}'")
    if help_text:
        click.echo(f"? {help_text}", err=True)
    click.echo(f"{question} options: {', '.join(options)}", err=True)

    while True:
        raw = click.prompt(question, default="", show_default=False)
        answers = [value.strip() for value in raw.split(",") if value.strip()]

        unknown = [value for value in answers if value not in options]
        if unknown:
            click.echo(f"Error: invalid choice(s): {', '.join(unknown)}", err=True)
            continue

        try:
            for validator in validators:
                validator(answers)
        except ConfigurationError as e:
            click.echo(f"Error: {e}", err=True)
            continue

        return answers


def availability_zones_count_validator(multi_az: bool) -> Validator:
    """Multi-AZ selections need exactly three zones, single-AZ exactly one."""

    def validate(answers: List[str]) -> None:
        if multi_az and len(answers) != MULTI_AZ_ZONE_COUNT:
            raise ConfigurationError(
                f"Number of availability zones for multi AZ cluster should be "
                f"{MULTI_AZ_ZONE_COUNT}, instead received: {len(answers)}"
            )
        if not multi_az and len(answers) != 1:
            raise ConfigurationError(
                f"Number of availability zones for single AZ cluster should be 1, "
                f"instead received: {len(answers)}"
            )

    return validate

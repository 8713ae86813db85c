#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Click options shared by KDFKit command line tools."""

import logging
import os
from typing import Any, Callable, Optional, TypeVar, Union

import click

from kdfkit import __version__ as kdfkit_version
from kdfkit.apps.utils.utils import KDFKitAppError

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def kdfkit_apps_common_options(options: FC) -> FC:
    """Add --help, --version and verbosity flags to a command.

    Provides: `log_level: int` for logging.

    :return: click decorator
    """
    decorators = [
        click.help_option("--help"),
        click.version_option(kdfkit_version, "--version"),
        click.option(
            "-vv",
            "--debug",
            "log_level",
            flag_value=logging.DEBUG,
            help="Display more debugging information.",
        ),
        click.option(
            "-v",
            "--verbose",
            "log_level",
            flag_value=logging.INFO,
            help="Print more detailed information",
        ),
    ]
    for decorator in decorators:
        options = decorator(options)
    return options


def _check_output(
    ctx: click.Context,
    param: click.Parameter,  # pylint: disable=unused-argument
    value: Optional[str],
) -> Optional[str]:
    force = ctx.params.pop("force", False)
    if ctx.resilient_parsing or not value:
        return value
    if os.path.exists(value) and not force:
        raise KDFKitAppError(f"Output file {value} already exists, use --force to overwrite it.")
    return value


def kdfkit_output_option(
    required: bool = True,
    help: Optional[str] = None,  # pylint: disable=redefined-builtin
) -> Callable:
    """Add -o/--output file option together with --force flag.

    Provides: `output: str` a full path to file. An existing file is refused
    with KDFKitAppError unless --force is given; the force flag itself is not
    passed to the command.

    :param required: Output option is required, defaults to True
    :param help: Customized help message, defaults to None
    :return: Click decorator
    """

    def decorator(func: FC) -> FC:
        func = click.option(
            "--force",
            is_flag=True,
            default=False,
            is_eager=True,
            help="Force overwriting of existing files.",
        )(func)
        return click.option(
            "-o",
            "--output",
            type=click.Path(resolve_path=True, dir_okay=False),
            required=required,
            help=help or "Path to a file, where to store the output.",
            callback=_check_output,
        )(func)

    return decorator


class KDFKitClickGroup(click.Group):
    """Click group listing the commands in the order they were added."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return command names in the order of registration.

        :param ctx: Click context.
        :return: List of command names.
        """
        return list(self.commands)

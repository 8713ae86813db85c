#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit application utilities.

Click parameter types, output formatting of key material and translation of
KDFKit exceptions into process exit codes.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click
import hexdump

from kdfkit import KDFKIT_DEBUG_LOG_FILE, KDFKIT_DEBUG_LOGGING_DISABLED
from kdfkit.exceptions import KDFKitError

logger = logging.getLogger(__name__)


class KDFKitAppError(KDFKitError):
    """Error of a KDFKit command line tool carrying the process exit code."""

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the application error.

        :param desc: Description printed on the command line, defaults to None
        :param error_code: Exit code of the process, defaults to 1
        """
        super().__init__(desc)
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type accepting integers with 0x, 0o, 0b prefixes and underscores."""

    name = "integer"

    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Convert command line value into integer.

        :param value: Value to convert.
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: Value as integer.
        """
        if isinstance(value, int):
            return value
        try:
            return int(value, 0)
        except (TypeError, ValueError):
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def format_raw_data(data: bytes, use_hexdump: bool = False) -> str:
    """Format key material for the console.

    :param data: Data to format.
    :param use_hexdump: Use hexdump with offsets and ASCII column, defaults to False
    :return: Single line hex string, or multi-line hexdump.
    """
    if use_hexdump:
        return hexdump.hexdump(data, result="return")
    return data.hex()


def _get_exit_code(exc: BaseException) -> int:
    if isinstance(exc, KDFKitAppError):
        return exc.error_code if 0 < exc.error_code < 256 else 1
    if isinstance(exc, (KDFKitError, AssertionError)):
        return 2
    return 3


def catch_kdfkit_error(function: Callable) -> Callable:
    """Catch exceptions of a command line tool and exit with matching code.

    KDFKitAppError exits with its own code, other KDFKitError (or AssertionError)
    with code 2 and anything else, including KeyboardInterrupt, with code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except (Exception, KeyboardInterrupt) as exc:  # pylint: disable=broad-except
            exit_code = _get_exit_code(exc)
            prefix = "GENERAL ERROR: " if exit_code == 3 else ""
            click.echo(f"{prefix}{type(exc).__name__}: {exc}", err=True)
            logger.debug(str(exc), exc_info=True)
            if not isinstance(exc, KDFKitAppError) and not KDFKIT_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {KDFKIT_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(exit_code)

    return wrapper

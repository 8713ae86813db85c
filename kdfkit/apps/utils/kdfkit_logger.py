#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit logging setup for command line tools.

Console output is colored per log level with colorama, a rotating debug log file
collects everything unless disabled by ``KDFKIT_DEBUG_LOGGING_DISABLED``. An
optional ``logging.yaml`` in the KDFKit configuration folder is applied with
:func:`logging.config.dictConfig`.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from typing import Optional, TextIO

import colorama

from kdfkit import (
    KDFKIT_CONFIG_FOLDER,
    KDFKIT_DEBUG_LOG_FILE,
    KDFKIT_DEBUG_LOGGING_DISABLED,
    __version__,
)
from kdfkit.exceptions import KDFKitError
from kdfkit.utils.misc import load_configuration

colorama.just_fix_windows_console()

logger = logging.getLogger(__name__)

LOGGING_CONFIG_FILE = "logging.yaml"
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def load_logging_config(config_folder: str = KDFKIT_CONFIG_FOLDER) -> Optional[str]:
    """Apply logging configuration from ``logging.yaml`` if there is one.

    :param config_folder: Folder with the configuration file.
    :return: Path to the applied configuration file, None if nothing was applied.
    """
    config_file = os.path.join(config_folder, LOGGING_CONFIG_FILE)
    if not os.path.isfile(config_file):
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (KDFKitError, ValueError, TypeError) as exc:
        logger.warning(f"Invalid logging configuration in {config_file}: {exc}")
        return None
    logger.debug(f"Logging config loaded from {config_file}")
    return config_file


class ColoredFormatter(logging.Formatter):
    """Formatter coloring whole records by their level.

    Records other than INFO also carry the time since start and source location.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    LEVEL_COLORS = {
        logging.DEBUG: colorama.Fore.BLUE,
        logging.INFO: colorama.Fore.WHITE + colorama.Style.BRIGHT,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }

    def __init__(self, colored: bool = True) -> None:
        """Initialize the formatter.

        :param colored: Wrap records into color codes, otherwise strip any color codes.
        """
        super().__init__()
        self.colored = colored
        self.plain = logging.Formatter(self.FORMAT)
        self.detailed = logging.Formatter(self.FORMAT_DEBUG)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        formatter = self.plain if record.levelno == logging.INFO else self.detailed
        text = formatter.format(record)
        if not self.colored:
            return ANSI_ESCAPE.sub("", text)
        return self.LEVEL_COLORS.get(record.levelno, "") + text + colorama.Style.RESET_ALL


def _add_debug_log(target_logger: logging.Logger) -> None:
    """Attach rotating debug log file handler, only once per log file.

    :param target_logger: Logger to attach the handler to.
    """
    for handler in target_logger.handlers:
        if getattr(handler, "baseFilename", None) == KDFKIT_DEBUG_LOG_FILE:
            return
    try:
        os.makedirs(os.path.dirname(KDFKIT_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            KDFKIT_DEBUG_LOG_FILE, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        target_logger.warning(f"Failed to initialize debug logging: {exc}")
        return
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)
    target_logger.debug(
        f"KDFKit {__version__} debug log started, Python {platform.python_version()} "
        f"on {platform.platform()}, command: {sys.argv}"
    )


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,  # pylint: disable=redefined-outer-name
) -> None:
    """Install KDFKit console log handler and the debug log file.

    :param level: Console logging level, defaults to logging.WARNING
    :param stream: Stream for console output, defaults to sys.stderr
    :param colored: Force colors on or off, by default colors are used on terminals
        unless NO_COLOR is set.
    :param logger: Logger to configure, defaults to the "kdfkit" logger
    """
    load_logging_config()

    if colored is None:
        # https://no-color.org/
        colored = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()

    target_logger = logger or logging.getLogger("kdfkit")
    target_logger.setLevel(logging.DEBUG)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level or logging.WARNING)
    handler.setFormatter(ColoredFormatter(colored))
    target_logger.addHandler(handler)

    if not KDFKIT_DEBUG_LOGGING_DISABLED:
        _add_debug_log(target_logger)

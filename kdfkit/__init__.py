#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit - HKDF-SHA256 key derivation toolkit.

The package derives key material with the HMAC-based Extract-and-Expand Key
Derivation Function (RFC 5869) keyed to SHA-256 and parses externally supplied
hexadecimal key material with a strict decoder.

INTERFACES:
    - Python library: :func:`kdfkit.crypto.hkdf.hkdf`, :func:`kdfkit.utils.misc.decode_hex`
    - Command line tool: ``kdftool``
"""

import os

from packaging.version import parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as _version_string

TRUE_VALUES = ("True", "true", "T", "1")


def env_flag(name: str) -> bool:
    """Read boolean setting from environment variable.

    :param name: Name of the environment variable.
    :return: True when the variable holds one of TRUE_VALUES.
    """
    return os.environ.get(name) in TRUE_VALUES


version = parse(_version_string)

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

# Settings read once at import
KDFKIT_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp", appname="kdfkit", version=version.base_version
)
KDFKIT_DEBUG_LOGGING_DISABLED = env_flag("KDFKIT_DEBUG_LOGGING_DISABLED")
KDFKIT_DEBUG_LOG_FILE = os.environ.get(
    "KDFKIT_DEBUG_LOG_FILE", os.path.join(KDFKIT_PLATFORM_DIRS.user_log_dir, "debug.log")
)
# Folder with optional logging.yaml
KDFKIT_CONFIG_FOLDER = os.environ.get("KDFKIT_CONFIG_FOLDER", os.path.expanduser("~/.kdfkit"))

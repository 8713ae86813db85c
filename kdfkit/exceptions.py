#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit exception classes.

This module defines the exception hierarchy used throughout the KDFKit library.
Every error raised by the library derives from :class:`KDFKitError`, so callers
can treat any of them as "no derived key material was produced".
"""

from typing import Optional


class KDFKitError(Exception):
    """Base of all KDFKit errors.

    The message is built from the class template ``fmt`` and the description given
    on construction.
    """

    fmt = "KDFKit: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Store the error description.

        :param desc: What went wrong, None gives "Unknown Error".
        """
        super().__init__(desc)
        self.description = desc

    def __str__(self) -> str:
        return self.fmt.format(description=self.description or "Unknown Error")


class KDFKitInvalidArgument(KDFKitError, ValueError):
    """KDFKit invalid argument exception.

    Raised when a caller-supplied parameter violates a documented precondition,
    for example an output length above the HKDF limit. Validation always happens
    before any cryptographic work is done.
    """


class KDFKitMalformedInput(KDFKitInvalidArgument):
    """KDFKit malformed input exception.

    Raised when textual input, such as a hexadecimal key string, can't be parsed:
    odd number of digits or a character outside of the accepted alphabet.
    """

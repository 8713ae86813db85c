#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit cryptographic exceptions module.

This module defines exception classes for failures of the underlying
cryptographic primitives used by the key derivation functions.
"""

from kdfkit.exceptions import KDFKitError


class KDFKitCryptoError(KDFKitError):
    """General KDFKit Crypto Error.

    Base exception class for all cryptographic operations within KDFKit.
    """


class KDFKitInternalCryptoError(KDFKitCryptoError):
    """KDFKit internal cryptographic failure.

    Raised when the HMAC-SHA256 primitive fails unexpectedly, e.g. the backend
    rejects the key. A correct HMAC accepts keys of any length, so this error points
    to a programming or environment problem rather than to a normal outcome.
    """

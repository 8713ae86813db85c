#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit HMAC-SHA256 utilities.

This module provides the keyed-hash capability consumed by the HKDF engine. Each
call builds its own HMAC context, no context is ever shared or reused between
invocations.
"""

from cryptography.exceptions import UnsupportedAlgorithm

# Used security modules
from cryptography.hazmat.primitives import hmac as hmac_cls

from kdfkit.crypto.exceptions import KDFKitInternalCryptoError
from kdfkit.crypto.hash import get_hash_algorithm


def hmac_sha256(key: bytes, *data: bytes) -> bytes:
    """Compute HMAC-SHA256 tag over concatenation of data chunks.

    The chunks are fed into the HMAC context one by one, which gives the same
    result as authenticating their concatenation.

    :param key: The HMAC key, any length is accepted.
    :param data: Input data chunks to be authenticated.
    :raises KDFKitInternalCryptoError: The underlying HMAC primitive failed.
    :return: HMAC-SHA256 tag, 32 bytes.
    """
    try:
        hmac_obj = hmac_cls.HMAC(key, get_hash_algorithm())
        for chunk in data:
            hmac_obj.update(chunk)
        return hmac_obj.finalize()
    except (TypeError, ValueError, UnsupportedAlgorithm) as exc:
        raise KDFKitInternalCryptoError(f"HMAC-SHA256 computation failed: {exc}") from exc

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit HKDF key derivation utilities.

This module implements the HMAC-based Extract-and-Expand Key Derivation Function
(HKDF) as defined in RFC 5869 (https://tools.ietf.org/html/rfc5869), keyed to
SHA-256. The HMAC primitive itself is provided by :mod:`kdfkit.crypto.kdfkit_hmac`.
"""

import logging
from math import ceil
from typing import Optional, Union

from kdfkit.crypto.hash import SHA256_OUTPUT_BYTES
from kdfkit.crypto.kdfkit_hmac import hmac_sha256
from kdfkit.exceptions import KDFKitInvalidArgument

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# Maximum value for the length parameter of hkdf(), the expand counter is a single byte
MAX_HKDF_OUTPUT_LENGTH = SHA256_OUTPUT_BYTES * 255

# Default all-zero salt used by HKDF if no salt is provided
NULL_SALT = bytes(SHA256_OUTPUT_BYTES)

EMPTY_BYTES = b""


def _to_bytes(value: Optional[BytesLike], name: str, default: Optional[bytes] = None) -> bytes:
    """Convert bytes-like parameter into bytes.

    :param value: Parameter value, None is replaced by the default.
    :param name: Parameter name used in the error message.
    :param default: Value used when the parameter is None; None makes the parameter required.
    :raises KDFKitInvalidArgument: The parameter is missing or isn't bytes-like.
    :return: Parameter value as bytes.
    """
    if value is None:
        if default is None:
            raise KDFKitInvalidArgument(f"The {name} parameter is required")
        return default
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise KDFKitInvalidArgument(
            f"The {name} parameter must be bytes, got {type(value).__name__}"
        )
    return bytes(value)


def _check_length(length: int) -> None:
    """Validate requested output length.

    :param length: Requested output length in bytes.
    :raises KDFKitInvalidArgument: Length is not an integer or is out of range.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise KDFKitInvalidArgument(f"Output length must be an integer, got {length!r}")
    if length < 0:
        raise KDFKitInvalidArgument(f"Output length can't be negative: {length}")
    if length > MAX_HKDF_OUTPUT_LENGTH:
        raise KDFKitInvalidArgument(
            f"Output length too large {length}, maximum is {MAX_HKDF_OUTPUT_LENGTH}"
        )


def _expand(prk: bytes, info: bytes, length: int) -> bytes:
    """Run the expand rounds on already validated parameters.

    :param prk: Pseudo-random key.
    :param info: Context information.
    :param length: Output length, 0 up to MAX_HKDF_OUTPUT_LENGTH.
    :return: Output keying material truncated exactly to the length.
    """
    output = bytearray(length)
    current = EMPTY_BYTES
    index = 0
    for counter in range(1, ceil(length / SHA256_OUTPUT_BYTES) + 1):
        current = hmac_sha256(prk, current, info, counter.to_bytes(1, "big"))
        size = min(SHA256_OUTPUT_BYTES, length - index)
        output[index : index + size] = current[:size]
        index += size
    return bytes(output)


def hkdf_extract(salt: Optional[BytesLike], ikm: BytesLike) -> bytes:
    """The "extract" stage of the extract-then-expand HKDF algorithm.

    The salt is used as the HMAC key and the input keying material as the message.

    :param salt: Optional salt value. If None, the all-zeros NULL_SALT is used.
    :param ikm: Input keying material.
    :raises KDFKitInvalidArgument: Invalid type of the input parameters.
    :raises KDFKitInternalCryptoError: The HMAC primitive failed.
    :return: Pseudo-random key of SHA256_OUTPUT_BYTES length.
    """
    salt_bytes = _to_bytes(salt, "salt", default=NULL_SALT)
    ikm_bytes = _to_bytes(ikm, "ikm")
    return hmac_sha256(salt_bytes, ikm_bytes)


def hkdf_expand(prk: BytesLike, info: Optional[BytesLike], length: int) -> bytes:
    """The "expand" stage of the extract-then-expand HKDF algorithm.

    Round ``i`` computes ``T(i) = HMAC(prk, T(i-1) || info || i)`` with ``T(0)`` empty
    and a single byte counter starting at 1. The output of the final round is copied
    only up to the requested length.

    :param prk: Pseudo-random key, at least SHA256_OUTPUT_BYTES long.
    :param info: Optional context information, None is the same as empty bytes.
    :param length: Length of the output key material in bytes.
    :raises KDFKitInvalidArgument: Invalid length or pseudo-random key.
    :raises KDFKitInternalCryptoError: The HMAC primitive failed.
    :return: Output keying material of the requested length.
    """
    _check_length(length)
    prk_bytes = _to_bytes(prk, "prk")
    if len(prk_bytes) < SHA256_OUTPUT_BYTES:
        raise KDFKitInvalidArgument(
            f"Pseudo-random key must have at least {SHA256_OUTPUT_BYTES} bytes, "
            f"got {len(prk_bytes)}"
        )
    return _expand(prk_bytes, _to_bytes(info, "info", default=EMPTY_BYTES), length)


def hkdf(
    ikm: BytesLike,
    salt: Optional[BytesLike] = None,
    info: Optional[BytesLike] = None,
    length: int = SHA256_OUTPUT_BYTES,
) -> bytes:
    """Derive key using HKDF-SHA256 as defined in RFC 5869.

    The function is deterministic, identical inputs always produce identical output.

    :param ikm: Input keying material.
    :param salt: Optional salt value. It doesn't need to be secret and can be reused
        between calls. If None, an all-zero salt of SHA256_OUTPUT_BYTES is used.
    :param info: Optional application and/or context specific information used to bind
        the derived key material to a particular context or use case.
    :param length: Length of the derived key in bytes, can't exceed MAX_HKDF_OUTPUT_LENGTH.
    :raises KDFKitInvalidArgument: Length is out of range or parameter has invalid type.
    :raises KDFKitInternalCryptoError: The HMAC primitive failed.
    :return: Derived key of ``length`` bytes.
    """
    _check_length(length)
    info_bytes = _to_bytes(info, "info", default=EMPTY_BYTES)

    prk = hkdf_extract(salt, ikm)
    logger.debug(
        f"HKDF-SHA256: deriving {length} bytes in "
        f"{ceil(length / SHA256_OUTPUT_BYTES)} rounds, info length {len(info_bytes)}"
    )
    return _expand(prk, info_bytes, length)

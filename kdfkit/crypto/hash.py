#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit hash algorithm definitions.

The key derivation in KDFKit is keyed to SHA-256 only. This module provides the
algorithm factory used by the HMAC wrapper and the digest size constant shared by
the HKDF engine.
"""

# Used security modules
from cryptography.hazmat.primitives import hashes


def get_hash_algorithm() -> hashes.HashAlgorithm:
    """Get a new SHA-256 hash algorithm instance.

    :return: Instance of the SHA-256 hash algorithm class.
    """
    return hashes.SHA256()


# Length of a SHA-256 digest, in bytes
SHA256_OUTPUT_BYTES = hashes.SHA256.digest_size

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit cryptographic operations module.

This module provides the HKDF-SHA256 key derivation function together with the
HMAC-SHA256 primitive it is built on.
"""

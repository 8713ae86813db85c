#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit utilities package.

This package contains helper functions for parsing key material and working
with files used by KDFKit applications.
"""

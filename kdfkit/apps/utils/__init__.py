#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit application utilities and helper functions.

This module provides common utility functions and helper modules used across
KDFKit command-line applications.
"""

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Fixtures shared by KDFKit tests."""

import os

import pytest

from tests.cli_runner import CliRunner

# must be set before kdfkit is imported, test runs don't write debug log files
os.environ["KDFKIT_DEBUG_LOGGING_DISABLED"] = "True"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Runner for kdftool commands.

    :return: CliRunner checking exit codes.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: pytest.FixtureRequest) -> str:
    """Folder ``data`` next to the requesting test module.

    :param request: Pytest request of the test module.
    :return: Absolute path of the data folder.
    """
    return os.path.join(os.path.dirname(str(request.path)), "data")

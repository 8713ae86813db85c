#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for KDFKit settings read from environment variables."""

import pytest

import kdfkit


@pytest.mark.parametrize(
    "value,expected",
    [("True", True), ("true", True), ("T", True), ("1", True), ("0", False), ("yes", False)],
)
def test_env_flag(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    """Test parsing of boolean environment variables.

    :param value: Value of the variable.
    :param expected: Expected flag.
    """
    monkeypatch.setenv("KDFKIT_TEST_FLAG", value)
    assert kdfkit.env_flag("KDFKIT_TEST_FLAG") is expected


def test_env_flag_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing variable is not set."""
    monkeypatch.delenv("KDFKIT_TEST_FLAG", raising=False)
    assert kdfkit.env_flag("KDFKIT_TEST_FLAG") is False


def test_debug_logging_disabled_in_tests() -> None:
    """Test that the flag exported by conftest was picked up at import."""
    assert kdfkit.KDFKIT_DEBUG_LOGGING_DISABLED is True
    assert kdfkit.__version__

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for the KDFKit exception hierarchy."""

import pytest

from kdfkit.apps.utils.utils import KDFKitAppError
from kdfkit.crypto.exceptions import KDFKitCryptoError, KDFKitInternalCryptoError
from kdfkit.exceptions import KDFKitError, KDFKitInvalidArgument, KDFKitMalformedInput


def test_error_message() -> None:
    """Test formatting of the error description."""
    assert str(KDFKitError("Something failed")) == "KDFKit: Something failed"
    assert str(KDFKitError()) == "KDFKit: Unknown Error"
    assert str(KDFKitAppError("Plain message")) == "Plain message"


@pytest.mark.parametrize(
    "error_cls,base_classes",
    [
        (KDFKitInvalidArgument, (KDFKitError, ValueError)),
        (KDFKitMalformedInput, (KDFKitInvalidArgument, KDFKitError, ValueError)),
        (KDFKitCryptoError, (KDFKitError,)),
        (KDFKitInternalCryptoError, (KDFKitCryptoError, KDFKitError)),
        (KDFKitAppError, (KDFKitError,)),
    ],
)
def test_error_hierarchy(error_cls: type, base_classes: tuple) -> None:
    """Test that every error can be caught by its base classes.

    :param error_cls: Tested exception class.
    :param base_classes: Expected base classes.
    """
    error = error_cls("failure")
    for base_class in base_classes:
        assert isinstance(error, base_class)


def test_internal_crypto_error_is_not_invalid_argument() -> None:
    """Test that crypto failures are not mistaken for caller errors."""
    assert not isinstance(KDFKitInternalCryptoError("failure"), ValueError)

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for KDFKit logger installation and colored formatter."""

import io
import logging
import logging.handlers
import os

import colorama
import pytest

from kdfkit.apps.utils import kdfkit_logger
from kdfkit.apps.utils.kdfkit_logger import ColoredFormatter


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("kdfkit.test", level, __file__, 1, msg, None, None)


def test_colored_formatter() -> None:
    """Test that colored formatter wraps the message into color codes."""
    text = ColoredFormatter(colored=True).format(_record(logging.ERROR, "failure"))
    assert text.startswith(colorama.Fore.RED)
    assert "ERROR:kdfkit.test:failure" in text


def test_plain_formatter() -> None:
    """Test that plain formatter removes color codes from the message."""
    record = _record(logging.INFO, colorama.Fore.GREEN + "derived" + colorama.Fore.RESET)
    assert ColoredFormatter(colored=False).format(record) == "INFO:kdfkit.test:derived"


def test_install(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that install adds console handler with requested level."""
    monkeypatch.setattr(kdfkit_logger, "load_logging_config", lambda: None)
    stream = io.StringIO()
    logger = logging.getLogger("kdfkit.test_install")
    kdfkit_logger.install(level=logging.INFO, stream=stream, logger=logger)
    try:
        logger.debug("hidden message")
        logger.info("visible message")
        assert "visible message" in stream.getvalue()
        assert "hidden message" not in stream.getvalue()
        assert not any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
        )
    finally:
        logger.handlers.clear()


def test_load_logging_config(data_dir: str) -> None:
    """Test applying logging configuration from a yaml file."""
    assert kdfkit_logger.load_logging_config(config_folder=data_dir).endswith("logging.yaml")
    assert logging.getLogger("kdfkit").level == logging.DEBUG


def test_load_logging_config_missing(tmpdir: str) -> None:
    """Test that missing logging configuration is ignored."""
    assert kdfkit_logger.load_logging_config(config_folder=str(tmpdir)) is None


def test_load_logging_config_invalid(tmpdir: str) -> None:
    """Test that logging configuration which can't be applied is ignored."""
    with open(os.path.join(tmpdir, "logging.yaml"), "w", encoding="utf-8") as f:
        f.write("- not\n- a dictionary\n")
    assert kdfkit_logger.load_logging_config(config_folder=str(tmpdir)) is None


def test_install_colors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that colors are used only when forced for non-terminal stream."""
    monkeypatch.setattr(kdfkit_logger, "load_logging_config", lambda: None)
    logger = logging.getLogger("kdfkit.test_install_colors")
    try:
        for colored, expected in ((None, False), (True, True)):
            stream = io.StringIO()
            kdfkit_logger.install(level=logging.INFO, stream=stream, colored=colored, logger=logger)
            logger.info("derived")
            assert (colorama.Style.RESET_ALL in stream.getvalue()) is expected
            logger.handlers.clear()
    finally:
        logger.handlers.clear()

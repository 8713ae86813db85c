#!/usr/bin/env python
# -*- coding: UTF-8 -*-
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit miscellaneous utilities and helper functions.

This module provides the strict hexadecimal decoder used to parse externally
supplied key material, together with file helpers and configuration loading used
by KDFKit applications.
"""

import logging
import os
from typing import Optional, Union

import yaml

from kdfkit.exceptions import KDFKitError, KDFKitInvalidArgument, KDFKitMalformedInput

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(text: str) -> bytes:
    """Decode a hex-encoded string into bytes.

    Accepts both lower- and upper-case [a-f] characters. No whitespace trimming and
    no prefix stripping is done, the caller is responsible for a clean hex string.

    :param text: The hexadecimal string to decode.
    :raises KDFKitMalformedInput: The input contains a non-hex character or its length
        is not a multiple of 2.
    :return: The input string converted to bytes.
    """
    if not isinstance(text, str):
        raise KDFKitMalformedInput(f"Hex input must be a string, got {type(text).__name__}")
    if len(text) % 2:
        raise KDFKitMalformedInput(f"Hex input must have even length, got {len(text)}")
    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise KDFKitMalformedInput(f"Invalid hex character {char!r} at position {position}")
    return bytes.fromhex(text)


def load_binary(path: str) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the file to load.
    :return: Content of the file.
    """
    logger.debug(f"Loading binary file from {path}")
    with open(path, "rb") as f:
        return f.read()


def load_text(path: str) -> str:
    """Load UTF-8 text file into string.

    :param path: Path to the file to load.
    :return: Content of the file.
    """
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(data: Union[str, bytes], path: str) -> int:
    """Write text or binary data to a file, missing parent folders are created.

    :param data: Data to store, bytes are written in binary mode, str as UTF-8 text.
    :param path: Path to the target file.
    :return: Number of characters or bytes written.
    """
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    logger.debug(f"Storing {type(data).__name__} data of length {len(data)} to {path}")
    if isinstance(data, bytes):
        with open(path, "wb") as f:
            return f.write(data)
    with open(path, "w", encoding="utf-8") as f:
        return f.write(data)


def load_hex_string(source: str, expected_size: Optional[int] = None, name: str = "key") -> bytes:
    """Load key material given either as a file path or as a hexadecimal string.

    A file holding text must contain a strict hex string, only the white space
    around it (e.g. trailing new line) is ignored. A file that is not UTF-8 text is
    taken as raw binary key material. Any other source is decoded with
    :func:`decode_hex`.

    :param source: File path or hexadecimal string.
    :param expected_size: Expected size of the data in bytes, None for any size.
    :param name: Name of the loaded data used in messages, defaults to "key".
    :raises KDFKitMalformedInput: The source or the text file is not a valid hex string.
    :raises KDFKitInvalidArgument: Size of the loaded data doesn't match expected size.
    :return: Loaded data.
    """
    if source and os.path.isfile(source):
        data = _load_key_file(source, name)
    else:
        try:
            data = decode_hex(source)
        except KDFKitMalformedInput as exc:
            raise KDFKitMalformedInput(
                f"The {name} is neither an existing file nor a valid hex string: {exc.description}"
            ) from exc

    if expected_size is not None and len(data) != expected_size:
        raise KDFKitInvalidArgument(
            f"Invalid {name} size. Expected: {expected_size}, got: {len(data)}"
        )
    return data


def _load_key_file(path: str, name: str) -> bytes:
    """Load key material from hex text file or binary file.

    :param path: Path to an existing file.
    :param name: Name of the loaded data used in messages.
    :raises KDFKitMalformedInput: The file holds text which is not a valid hex string.
    :return: Loaded data.
    """
    raw_data = load_binary(path)
    try:
        text = raw_data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"The {name} loaded as binary data from {path}")
        return raw_data

    hex_text = text.strip()
    if raw_data and not hex_text:
        raise KDFKitMalformedInput(f"The {name} file {path} holds only white space")
    try:
        data = decode_hex(hex_text)
    except KDFKitMalformedInput as exc:
        raise KDFKitMalformedInput(
            f"The {name} file {path} doesn't hold a valid hex string: {exc.description}"
        ) from exc
    logger.debug(f"The {name} loaded as hex string from {path}")
    return data


def load_configuration(path: str) -> dict:
    """Load configuration from YAML (or JSON, as YAML superset) file.

    :param path: Path to configuration file.
    :raises KDFKitError: File can't be read or parsed, or it doesn't hold a dictionary.
    :return: Content of configuration as dictionary.
    """
    try:
        config_data = yaml.safe_load(load_text(path))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise KDFKitError(f"Can't load configuration file {path}: {exc}") from exc

    if not isinstance(config_data, dict):
        raise KDFKitError(f"Invalid configuration file: {path}")
    return config_data

#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KDFKit command-line tool for HKDF-SHA256 key derivation.

The tool derives key material from hexadecimal (or file based) input keying
material and converts hexadecimal key strings into binary key files.
"""

import logging
import sys
from typing import Optional

import click

from kdfkit.apps.utils import kdfkit_logger
from kdfkit.apps.utils.common_cli_options import (
    KDFKitClickGroup,
    kdfkit_apps_common_options,
    kdfkit_output_option,
)
from kdfkit.apps.utils.utils import INT, catch_kdfkit_error, format_raw_data
from kdfkit.crypto.hash import SHA256_OUTPUT_BYTES
from kdfkit.crypto.hkdf import MAX_HKDF_OUTPUT_LENGTH, hkdf
from kdfkit.utils.misc import decode_hex, load_hex_string, write_file

logger = logging.getLogger(__name__)


@click.group(name="kdftool", cls=KDFKitClickGroup, no_args_is_help=True)
@kdfkit_apps_common_options
def main(log_level: int) -> None:
    """HKDF-SHA256 key derivation tool (RFC 5869)."""
    kdfkit_logger.install(level=log_level)


@main.command(name="derive", no_args_is_help=True)
@click.option(
    "-i",
    "--ikm",
    required=True,
    help="Input keying material. Hexadecimal string or path to a file (hex text or binary).",
)
@click.option(
    "-s",
    "--salt",
    help="Optional salt. Hexadecimal string or path to a file. All-zero salt is used if omitted.",
)
@click.option(
    "-n",
    "--info",
    help="Optional context information. Hexadecimal string or path to a file.",
)
@click.option(
    "-l",
    "--length",
    type=INT(),
    default=SHA256_OUTPUT_BYTES,
    show_default=True,
    help=f"Length of the derived key in bytes, maximum is {MAX_HKDF_OUTPUT_LENGTH}.",
)
@click.option(
    "--hexdump",
    "use_hexdump",
    is_flag=True,
    default=False,
    help="Print the derived key using hexdump format.",
)
@kdfkit_output_option(
    required=False,
    help="Path to a binary file, where to store the derived key. "
    "If omitted, the key is printed as hexadecimal string.",
)
def derive(
    ikm: str,
    salt: Optional[str],
    info: Optional[str],
    length: int,
    use_hexdump: bool,
    output: Optional[str],
) -> None:
    """Derive key material using HKDF-SHA256."""
    ikm_bytes = load_hex_string(ikm, name="input keying material")
    salt_bytes = None if salt is None else load_hex_string(salt, name="salt")
    info_bytes = None if info is None else load_hex_string(info, name="info")

    logger.info(f"Deriving {length} bytes of key material")
    okm = hkdf(ikm_bytes, salt=salt_bytes, info=info_bytes, length=length)

    if output:
        write_file(okm, output)
        click.echo(f"Derived key ({len(okm)} bytes) has been stored into: {output}")
        return
    click.echo(format_raw_data(okm, use_hexdump=use_hexdump))


@main.command(name="decode-hex", no_args_is_help=True)
@click.option(
    "-x",
    "--hex",
    "hex_string",
    required=True,
    help="Hexadecimal string to decode, digits only, no prefix or white spaces.",
)
@kdfkit_output_option(help="Path to a binary file, where to store the decoded data.")
def decode_hex_command(hex_string: str, output: str) -> None:
    """Convert hexadecimal string into binary file."""
    data = decode_hex(hex_string)
    write_file(data, output)
    click.echo(f"Decoded data ({len(data)} bytes) has been stored into: {output}")


@catch_kdfkit_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()

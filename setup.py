#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

import os

from setuptools import find_packages, setup  # type: ignore


def read_requirements(path: str) -> list:
    """Requirement lines of the file without includes of other files."""
    with open(path, encoding="utf-8") as req_file:
        lines = req_file.read().splitlines()
    return [line for line in lines if line and not line.startswith("-r")]


about: dict = {}
with open(os.path.join("kdfkit", "__version__.py"), encoding="utf-8") as version_file:
    exec(version_file.read(), about)  # nosec: exec_used

with open("README.md", encoding="utf-8") as readme:
    long_description = readme.read()

setup(
    name="kdfkit",
    version=about["__version__"],
    description="HKDF-SHA256 key derivation (RFC 5869) and strict hex key parsing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="NXP",
    license="BSD-3-Clause",
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-develop.txt")},
    packages=find_packages(exclude=["tests.*", "tests"]),
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: BSD License",
        "Topic :: Security :: Cryptography",
    ],
    entry_points={"console_scripts": ["kdftool=kdfkit.apps.kdftool:safe_main"]},
)

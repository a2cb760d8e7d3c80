#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
from pathlib import Path
from setuptools import setup

HERE = Path(os.path.abspath(__file__)).resolve().parent
README = (HERE / "readme.md").read_text()

setup(
    name="ansistrip",
    version="1.0.0",
    description="A command line tool and library that strips ANSI escape codes from text.",
    long_description=README,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    keywords="ansi, escape, terminal, strip",
    python_requires=">=3.10",
    packages=["ansistrip", "ansistrip.core", "ansistrip.core.logging"],
    include_package_data=True,
    install_requires=[
        "click>=8.2",
        "colorama",
    ],
    extras_require={"test": ["pytest<9.1"]},
    entry_points={"console_scripts": ["ansistrip=ansistrip.cli:cli"]},
)

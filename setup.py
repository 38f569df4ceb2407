#!/usr/bin/env python

import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(current_dir, "rationals", "__init__.py")) as f:
    __version__ = re.search(
        r'^__version__ = "(.+)"$', f.read(), re.MULTILINE).group(1)

setup(
    name="rationals",
    version=__version__,
    description="Arbitrary precision rational numbers in canonical form",
    packages=["rationals"],
    python_requires=">=3.7",
    install_requires=[
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "rational-calc=rationals.calculate:main"
        ]
    }
)

#!/usr/bin/env python3
"""
Build ctlesc as a Python library.

The quoting passes are pure Python, so there are no extension modules.
"""
from setuptools import setup

setup(
    name="ctlesc",
    version="0.1",
    description="Sentinel-byte quoting for shell word expansion",
    packages=["ctlesc"],
    python_requires=">=3.6",
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)

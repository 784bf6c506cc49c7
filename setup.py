#!/usr/bin/env python3
"""
Assoc-Array Setup Script
========================
Allows installation of the assoc-array package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="assoc-array",
    version="1.0.0",
    packages=find_packages(include=["assoc_array", "assoc_array.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
)

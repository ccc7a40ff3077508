#!/usr/bin/env python3
"""
Setup script for ribokit - Genetic-code translation library
"""

from setuptools import setup, find_packages

with open("README_ribokit.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="ribokit",
    version="0.1.0",
    author="ribokit Contributors",
    description="mRNA to protein translation under selectable genetic codes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "ribokit-translate=ribokit.cli:main",
        ],
    },
)

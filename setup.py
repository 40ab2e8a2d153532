#!/usr/bin/env python3
"""
Setup script for Artist Store package.
"""

from setuptools import setup, find_packages

# Read version from package metadata without importing its dependencies
version = {}
with open("artist_store/__init__.py") as f:
    for line in f:
        if line.startswith(("__version__", "__author__", "__description__")):
            exec(line, version)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="artist-store",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "artist-store=artist_store.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="artist schedule booking database postgresql psycopg",
)

#!/usr/bin/env python

from setuptools import setup, find_packages
import os

long_description = "HyperLogLog cardinality estimation"
if os.path.exists("README.md"):
    with open("README.md", "r") as fh:
        long_description = fh.read()

setup(
    name="cardinal",
    version="0.1.0",
    description="HyperLogLog Cardinality Estimation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "benchmarks", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=[
        "numpy",
        "xxhash",
    ],
    extras_require={
        'plot': ['matplotlib'],
        'dev': [
            'pytest>=7.0.0',
            'matplotlib',
        ],
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'cardinal=cardinal.cardinal:main',
        ],
    },
)

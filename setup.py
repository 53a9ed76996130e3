#!/usr/bin/env python3
"""
Setup script for pycmsearch
"""

from setuptools import setup, find_packages

setup(
    name="pycmsearch",
    version="0.1.0",
    description="Parser for Infernal cmsearch RNA covariance model search reports",
    author="pycmsearch developers",
    packages=find_packages(include=["cmsearch", "cmsearch.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "biopython>=1.80",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'cmsearch-parse=cmsearch.cli.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)

#!/usr/bin/env python3

from pathlib import Path

from setuptools import setup

setup(
    name="pazzfraze",
    version=(Path(__file__).parent / 'VERSION').read_text().strip(),
    description="Generate nice-looking passwords out of a master password and a domain name",
    packages=["pazzfraze", "pazzfraze.backend"],
    package_data={"pazzfraze": ["words.txt"]},
    python_requires=">=3.8",
    install_requires=[
        "cryptography",
        "prompt_toolkit",
        "blessed",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx"],
    },
    entry_points={
        "console_scripts": ["pazzfraze = pazzfraze.main:main"],
    },
)

#!/usr/bin/env python
import re
from io import open

from setuptools import setup

__author__ = "urleq"


tests_requires = ["responses", "testfixtures", "pytest"]

with open("src/urleq/__init__.py", "r") as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

setup(
    name="urleq",
    version=version,
    description="Structural URL equality with selectively ignored components",
    long_description=open("README.rst", encoding="utf-8").read(),
    license="Apache-2.0",
    packages=[
        "urleq",
        "urleq/utils",
    ],
    package_dir={"": "src"},
    package_data={"urleq": ["py.typed"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires="~=3.9",
    extras_require={
        "testing": tests_requires,
        "quality": ["mypy", "ruff"],
        "types": ["types-requests"],
    },
    install_requires=[
        "requests",
        "pydantic>=2",
        "pydantic-settings",
    ],
    long_description_content_type="text/x-rst",
    zip_safe=False,
)

"""Setup script for the TRON client context."""

import os
import re
from setuptools import setup, find_packages

# Get description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get version from package without importing it
with open(os.path.join("tron_context", "__init__.py"), "r", encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)


def read_requirements(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f.readlines()
                if line.strip() and not line.startswith("#")]


# Get dependencies from requirements files
requirements = read_requirements("requirements.txt")
test_requirements = read_requirements("requirements-test.txt")

setup(
    name="tron-context",
    version=version,
    description="Client context for the TRON network: endpoints, default account and validation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
)

#!/usr/bin/env python

# Usage:
#  $ pip install .

from setuptools import setup, find_packages


# util function to get version information from file with __version__=
def get_version(filename):
    try:
        with open(filename, "r") as f:
            for line in f:
                if line.startswith("__version__"):
                    # extract the version string and strip it
                    version = line.split('"')[1].strip().strip('"').strip("'")
                    return version
    except FileNotFoundError:
        print(f"Cannot get version information from {filename}")


setup(
    name="versioned",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    version=get_version("./src/versioned/_version.py"),
    description="Wrapper type which counts mutable accesses to the value it holds",
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)

# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""setup for development and installation"""

from setuptools import find_packages, setup

# The complexity of versioning
# https://pythonrepo.com/repo/pypa-setuptools_scm-python-build-tools

with open("README.md", "r", encoding="utf-8") as fp:
    long_description = fp.read()

setup(
    name="dlcsync",
    version="0.1.0",
    license="GPL3",
    author="Francis Meyvis",
    author_email="pwsync@mikmak.fun",
    description="Synchronize the download clients of Sonarr/Radarr-like servers with a config file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX :: Linux",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Environment :: Console",
    ],
    python_requires=">=3.9.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "diffsync>=2.0",
        "prompt-toolkit>=3.0.28",
        "PyYAML>=6.0",
        "requests>=2.28",
    ],
    extras_require={
        "dev": [
            "black",
            "pylama[all]",
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "types-PyYAML",
            "types-requests",
            "pre-commit",
        ],
        "build": [
            "setuptools>=45.0",
            "wheel",
            "build",
            "twine",
        ],
    },
    entry_points={
        "console_scripts": ["dlcsync=dlcsync.main:main"],
    },
)

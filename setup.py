# -*- coding: utf-8 -*-

import os
import re
import subprocess

from setuptools import find_packages, setup

extras_require = {
    "test": [
        "pytest>=6.2.5",
        "pytest-cov>=2.10",
        "pytest-instafail>=0.4",
        "pytest-xdist>=2.5",
        "hypothesis>=6.0",
    ],
    "lint": [
        "black==23.12.0",
        "flake8==6.1.0",
        "flake8-bugbear==23.12.2",
        "flake8-use-fstring==1.4",
        "isort==5.13.2",
        "mypy==1.5",
    ],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


# strip local version
def _local_version(version):
    return ""


def _global_version(version):
    from setuptools_scm.version import guess_next_dev_version

    # strip `.devN` suffix since it is not semver compatible
    version_str = guess_next_dev_version(version)
    return re.sub(r"\.dev\d+", "", version_str)


hash_file_rel_path = os.path.join("lazyrange", "lazyrange_git_commithash.txt")
hashfile = os.path.relpath(hash_file_rel_path)

# add the commit hash to the package separately from the version, so that
# it shows up in `lazyrange --version`.
try:
    commithash = subprocess.check_output("git rev-parse --short HEAD".split())
    commithash_str = commithash.decode("utf-8").strip()
    with open(hashfile, "w") as fh:
        fh.write(commithash_str)
except (subprocess.CalledProcessError, FileNotFoundError):
    pass


setup(
    name="lazyrange",
    use_scm_version={
        "local_scheme": _local_version,
        "version_scheme": _global_version,
        "write_to": "lazyrange/version.py",
        "fallback_version": "0.1.0",
    },
    description="Lazy, immutable arithmetic progressions with an array-like API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="lazyrange contributors",
    author_email="",
    license="Apache License 2.0",
    keywords="range sequence arithmetic progression lazy",
    include_package_data=True,
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10,<4",
    install_requires=[],
    extras_require=extras_require,
    entry_points={"console_scripts": ["lazyrange=lazyrange.cli.lazyrange_cli:_parse_cli_args"]},
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    package_data={"lazyrange": ["lazyrange_git_commithash.txt"]},
)

import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aoc_helper", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="aoc-helper",
    version=version,
    description="Fetch, cache and check your Advent of Code puzzle solutions",
    packages=["aoc_helper"],
    entry_points={
        "console_scripts": [
            "aoc-helper=aoc_helper.cli:main",
        ],
    },
    license="MIT",
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    install_requires=[
        "urllib3",
        "termcolor>=2.1",
        'colorama>=0.4.6; platform_system == "Windows"',
        'tzdata; platform_system == "Windows"',
        'tomli; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-raisin",
            "pook",
            "freezegun",
            "pytest-freezer",
        ],
    },
)

#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="gaussmix",
    version="0.1.0",
    description="Normal, multivariate normal and Gaussian mixture densities and samplers",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",

    # this will find the gaussmix/ package (and any subpackages),
    # but exclude tests, docs, examples, etc.
    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

    include_package_data=False,
)

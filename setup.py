#!/usr/bin/env python3
"""
Setup script for simrand - a seedable pseudo-random number engine.

This package provides a deterministic multiply-with-carry generator, samplers
for common statistical distributions and per-thread generator instances.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "simrand - seedable pseudo-random numbers and distribution samplers"

setup(
    name="simrand",
    version="1.0.0",
    author="simrand Development Team",
    author_email="simrand-dev@example.com",
    description="Seedable pseudo-random number engine with statistical distribution samplers",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests*', '*.tests', '*.tests.*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26.3",
        "PyYAML>=6.0.1",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    package_data={
        "simrand": [
            "configs/templates/*.ini",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="random numbers, simulation, statistics, distributions, monte carlo",
)

"""Setup script for vbuilder."""

from pathlib import Path

from setuptools import find_packages, setup

README = Path("README.md")
long_description = README.read_text() if README.exists() else ""

setup(
    name="vbuilder",
    version="0.1.0",
    description="Build a Go project and create a systemd service for it",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["vbuilder", "vbuilder.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vbuilder=vbuilder.__main__:main",
        ],
    },
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Build Tools",
        "Topic :: System :: Systems Administration",
    ],
)

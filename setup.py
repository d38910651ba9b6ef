"""Setup script for zotero-tropy."""

from setuptools import setup, find_packages
import os

# Read version from version.py
version = {}
with open(os.path.join("zotero_tropy", "core", "version.py")) as f:
    exec(f.read(), version)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

# Read README
with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="zotero-tropy",
    version=version["__version__"],
    description="Convert Zotero JSON exports into Tropy import CSV files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["zotero_tropy", "zotero_tropy.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Sociology :: History",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "zotero-tropy=zotero_tropy.__main__:main",
        ],
    },
)

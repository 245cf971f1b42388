"""
Setup script for recmat

Pure-Python package with a src/ layout. numpy is required; scipy is only
needed for the scipy conversion helpers (to_scipy / from_scipy).
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/recmat/__init__.py
def get_version():
    version_file = Path("src/recmat/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="recmat",
    version=get_version(),
    description="Memory-conscious matrix data types for recommender systems",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "scipy": ["scipy>=1.7"],
        "test": ["pytest>=7.0", "scipy>=1.7"],
    },
    zip_safe=True,
)

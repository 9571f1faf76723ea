import os
from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Get version from environment variable or fallback to default
version = os.environ.get("PACKAGE_VERSION", "1.0.0")

setup(
    name="PyLandmarkConverter",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    license="MIT",
    description="convert registration landmarks between Image eXplorer, Transformix, 3D Slicer and plain text formats",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pynrrd",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "landmark-converter=PyLandmarkConverter.cli:main",
        ],
    },
)

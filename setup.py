"""Setup script for scitypes."""
from setuptools import find_packages, setup


setup(
    name="scitypes",
    version="0.1.0",
    description=(
        "Scientific types for tabular and array data: detection, coercion, "
        "schemas and automatic type suggestions."
    ),
    packages=find_packages(include=["scitypes", "scitypes.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

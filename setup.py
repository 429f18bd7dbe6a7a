"""Setup configuration for the Storefront catalog backend."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="storefront-catalog",
    version="0.1.0",
    description="Catalog backend: CSV bulk importers and a read-only catalog API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["storefront", "storefront.*"], exclude=["storefront.tests"]),
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "storefront-import=storefront.utils.import_cli:main",
            "storefront-api=storefront.main:main",
        ],
    },
)

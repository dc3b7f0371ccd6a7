"""Setup script for Coverage Matrix"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="coverage-matrix",
    version="0.1.0",
    description="Interactive matrix of curriculum goal coverage by program category",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Education",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.0.0",
        "requests>=2.28.0",
        "tomli>=2.0.0; python_version < '3.11'",
    ],
    extras_require={
        "serve": [
            "starlette>=0.27.0",
            "uvicorn>=0.23.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
            "starlette>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "coverage-matrix=coverage_matrix.cli:app",
        ],
    },
    keywords="curriculum coverage matrix education programs visualization",
)
